"""Labels shown for candidates in select lists."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from .api.models import Organization, Region, VMSize

T = TypeVar("T")


def format_organization(org: Organization) -> str:
    """Format an organization choice label.

    The personal callout is skipped when the slug already says "personal".

    Examples:
        >>> format_organization(Organization("1", "acme", "Acme", "PERSONAL"))
        'Acme (acme) [personal]'
        >>> format_organization(Organization("1", "personal", "Acme", "PERSONAL"))
        'Acme (personal)'
    """
    callout = ""
    if org.is_personal and org.slug != "personal":
        callout = " [personal]"
    return f"{org.name} ({org.slug}){callout}"


def format_region(region: Region) -> str:
    return f"{region.name} ({region.code})"


def format_vm_size(size: VMSize) -> str:
    return f"{size.name} - {size.memory_mb}"


def default_option(
    items: Sequence[T],
    format_item: Callable[[T], str],
    is_default: Callable[[T], bool],
) -> str | None:
    """Return the label of the first item matching is_default, if any."""
    for item in items:
        if is_default(item):
            return format_item(item)
    return None


__all__ = [
    "format_organization",
    "format_region",
    "format_vm_size",
    "default_option",
]
