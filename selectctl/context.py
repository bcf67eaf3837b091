"""Selection context passed to every resolver."""

from dataclasses import dataclass, field

from .api.client import PlatformClient
from .config import Config
from .iostreams import IOStreams


@dataclass(frozen=True)
class SelectionContext:
    """Read-only state of one command invocation.

    Holds the session streams, the platform client and the pre-set values
    taken from flags and configuration.
    """

    session: IOStreams
    client: PlatformClient
    organization: str | None = None
    region: str | None = None
    vm_size: str | None = None
    regions: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(
        cls, session: IOStreams, client: PlatformClient, config: Config
    ) -> "SelectionContext":
        return cls(
            session=session,
            client=client,
            organization=config.organization,
            region=config.region,
            vm_size=config.vm_size,
            regions=config.regions,
        )


__all__ = ["SelectionContext"]
