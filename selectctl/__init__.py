"""selectctl: resolve organization, region and vm size selections for CLI commands."""

import logging
import sys

from .api import CatalogClient, Organization, PlatformClient, Region, VMSize
from .config import Config, ConfigError, load_config
from .context import SelectionContext
from .errors import ErrorKind, SelectionError, format_error, format_suggestion
from .iostreams import IOStreams, can_prompt
from .resolvers import (
    multi_select_from_list,
    resolve_organization,
    resolve_region,
    resolve_regions,
    resolve_vm_size,
    select_from_list,
)

__version__ = "0.1.0"


def setup_logging(debug: bool = False) -> None:
    """Configure root logging; DEBUG when debug is set, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


__all__ = [
    "CatalogClient",
    "Config",
    "ConfigError",
    "ErrorKind",
    "IOStreams",
    "Organization",
    "PlatformClient",
    "Region",
    "SelectionContext",
    "SelectionError",
    "VMSize",
    "can_prompt",
    "format_error",
    "format_suggestion",
    "load_config",
    "multi_select_from_list",
    "resolve_organization",
    "resolve_region",
    "resolve_regions",
    "resolve_vm_size",
    "select_from_list",
    "setup_logging",
]
