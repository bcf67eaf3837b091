"""Candidate providers: fetch from the platform and order for display.

Fetch failures propagate unchanged. Nothing is retried or cached.
"""

import logging

from .api.client import PlatformClient
from .api.models import Organization, Region, VMSize
from .sorting import (
    organizations_by_type_and_name,
    regions_by_name_and_code,
    vm_sizes_by_size,
)

_logging = logging.getLogger(__name__)


def sorted_organizations(client: PlatformClient) -> list[Organization]:
    orgs = organizations_by_type_and_name(client.get_organizations())
    _logging.debug(f"Fetched {len(orgs)} organizations")
    return orgs


def sorted_regions(client: PlatformClient) -> tuple[list[Region], Region | None]:
    """Return platform regions sorted by name and code, plus the default region."""
    regions, default_region = client.platform_regions()
    regions = regions_by_name_and_code(regions)
    _logging.debug(
        f"Fetched {len(regions)} regions "
        f"(default: {default_region.code if default_region else 'none'})"
    )
    return regions, default_region


def sorted_vm_sizes(client: PlatformClient) -> list[VMSize]:
    sizes = vm_sizes_by_size(client.platform_vm_sizes())
    _logging.debug(f"Fetched {len(sizes)} vm sizes")
    return sizes


__all__ = ["sorted_organizations", "sorted_regions", "sorted_vm_sizes"]
