"""Candidate records returned by the platform."""

from dataclasses import dataclass

PERSONAL = "PERSONAL"


@dataclass(frozen=True)
class Organization:
    id: str
    slug: str
    name: str
    type: str

    @property
    def is_personal(self) -> bool:
        return self.type == PERSONAL


@dataclass(frozen=True)
class Region:
    code: str
    name: str
    gateway_available: bool = False
    requires_paid_plan: bool = False


@dataclass(frozen=True)
class VMSize:
    name: str
    cpu_cores: float
    memory_mb: int
    memory_gb: float = 0.0
    price_month: float = 0.0
    price_second: float = 0.0


__all__ = ["PERSONAL", "Organization", "Region", "VMSize"]
