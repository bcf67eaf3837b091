"""Canonical display orderings for candidate lists."""

from .api.models import Organization, Region, VMSize


def _organization_key(org: Organization) -> tuple[int, str, str]:
    # Shared organizations first, personal ones last.
    return (1 if org.is_personal else 0, org.name, org.slug)


def organizations_by_type_and_name(orgs: list[Organization]) -> list[Organization]:
    return sorted(orgs, key=_organization_key)


def regions_by_name_and_code(regions: list[Region]) -> list[Region]:
    """Sort regions by name, ties broken by code.

    Examples:
        >>> [r.code for r in regions_by_name_and_code(
        ...     [Region("z", "Z"), Region("b", "A"), Region("a", "A")])]
        ['a', 'b', 'z']
    """
    return sorted(regions, key=lambda r: (r.name, r.code))


def vm_sizes_by_size(sizes: list[VMSize]) -> list[VMSize]:
    return sorted(sizes, key=lambda s: (s.memory_mb, s.name))


__all__ = [
    "organizations_by_type_and_name",
    "regions_by_name_and_code",
    "vm_sizes_by_size",
]
