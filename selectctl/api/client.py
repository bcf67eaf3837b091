"""Platform data sources.

``PlatformClient`` is the contract the resolvers depend on. ``CatalogClient``
implements it from a YAML catalog file:

    organizations:
      - {id: o1, slug: acme, name: Acme, type: SHARED}
    regions:
      default: ord
      items:
        - {code: ord, name: "Chicago, Illinois (US)"}
    vm_sizes:
      - {name: shared-cpu-1x, cpu_cores: 1, memory_mb: 256}

The file is read on every call. Any read, syntax or shape problem raises
``SelectionError(FETCH_FAILED)``.
"""

import logging
from pathlib import Path
from typing import Any, Protocol

from ..config import ConfigError, load_yaml
from ..errors import fetch_failed, format_field_error
from .models import Organization, Region, VMSize

_logging = logging.getLogger(__name__)


class PlatformClient(Protocol):
    def get_organizations(self) -> list[Organization]: ...

    def platform_regions(self) -> tuple[list[Region], Region | None]: ...

    def platform_vm_sizes(self) -> list[VMSize]: ...


def _require_str_field(data: dict, field: str, entity_name: str) -> str:
    if field not in data:
        raise ConfigError(f"{entity_name} missing required field: {field}")
    value = data[field]
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(format_field_error(entity_name, field, "must be a non-empty string"))
    return value


def _require_number_field(data: dict, field: str, entity_name: str) -> float:
    if field not in data:
        raise ConfigError(f"{entity_name} missing required field: {field}")
    value = data[field]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(format_field_error(entity_name, field, "must be a number"))
    return value


def _optional_number_field(data: dict, field: str, entity_name: str) -> float:
    if data.get(field) is None:
        return 0.0
    return float(_require_number_field(data, field, entity_name))


def _optional_bool_field(data: dict, field: str, entity_name: str) -> bool:
    value = data.get(field, False)
    if not isinstance(value, bool):
        raise ConfigError(format_field_error(entity_name, field, "must be a boolean"))
    return value


def _require_list(data: Any, entity_name: str) -> list:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"{entity_name} must be a list")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigError(f"{entity_name}[{i}] must be a mapping")
    return data


def _parse_organization(data: dict, index: int) -> Organization:
    entity = f"organizations[{index}]"
    return Organization(
        id=str(data.get("id") or _require_str_field(data, "slug", entity)),
        slug=_require_str_field(data, "slug", entity),
        name=_require_str_field(data, "name", entity),
        type=_require_str_field(data, "type", entity).upper(),
    )


def _parse_region(data: dict, index: int) -> Region:
    entity = f"regions.items[{index}]"
    return Region(
        code=_require_str_field(data, "code", entity),
        name=_require_str_field(data, "name", entity),
        gateway_available=_optional_bool_field(data, "gateway_available", entity),
        requires_paid_plan=_optional_bool_field(data, "requires_paid_plan", entity),
    )


def _parse_vm_size(data: dict, index: int) -> VMSize:
    entity = f"vm_sizes[{index}]"
    memory_mb = _require_number_field(data, "memory_mb", entity)
    memory_gb = _optional_number_field(data, "memory_gb", entity) or memory_mb / 1024
    return VMSize(
        name=_require_str_field(data, "name", entity),
        cpu_cores=_require_number_field(data, "cpu_cores", entity),
        memory_mb=int(memory_mb),
        memory_gb=memory_gb,
        price_month=_optional_number_field(data, "price_month", entity),
        price_second=_optional_number_field(data, "price_second", entity),
    )


class CatalogClient:
    """PlatformClient backed by a local YAML catalog file."""

    def __init__(self, path: Path):
        self.path = path

    def _section(self, key: str) -> Any:
        _logging.debug(f"Reading {key} from catalog {self.path}")
        try:
            data = load_yaml(self.path)
        except ConfigError as e:
            raise fetch_failed(f"failed to load catalog: {e}") from e
        if not isinstance(data, dict):
            raise fetch_failed(f"catalog {self.path} must be a mapping")
        return data.get(key)

    def get_organizations(self) -> list[Organization]:
        try:
            items = _require_list(self._section("organizations"), "organizations")
            return [_parse_organization(item, i) for i, item in enumerate(items)]
        except ConfigError as e:
            raise fetch_failed(f"invalid catalog {self.path}: {e}") from e

    def platform_regions(self) -> tuple[list[Region], Region | None]:
        try:
            section = self._section("regions") or {}
            if isinstance(section, list):
                section = {"items": section}
            if not isinstance(section, dict):
                raise ConfigError("regions must be a mapping or a list")
            items = _require_list(section.get("items"), "regions.items")
            regions = [_parse_region(item, i) for i, item in enumerate(items)]
        except ConfigError as e:
            raise fetch_failed(f"invalid catalog {self.path}: {e}") from e

        default_code = section.get("default")
        default = next((r for r in regions if r.code == default_code), None)
        return regions, default

    def platform_vm_sizes(self) -> list[VMSize]:
        try:
            items = _require_list(self._section("vm_sizes"), "vm_sizes")
            return [_parse_vm_size(item, i) for i, item in enumerate(items)]
        except ConfigError as e:
            raise fetch_failed(f"invalid catalog {self.path}: {e}") from e


__all__ = ["PlatformClient", "CatalogClient"]
