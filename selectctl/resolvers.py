"""Resolvers for organization, region(s) and vm size.

Each resolver follows the same protocol:
1. Fetch the sorted candidates (fetch errors propagate unchanged)
2. Pre-set value given: return the exact key match, or fail with NOT_FOUND
3. Organization only: a lone personal organization is selected automatically
4. Otherwise prompt; NOT_INTERACTIVE from the prompt becomes a
   resource-specific VALUE_REQUIRED error, anything else propagates
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

import click

from .api.models import Organization, Region, VMSize
from .context import SelectionContext
from .errors import ErrorKind, SelectionError, not_found, value_required
from .formatters import (
    default_option,
    format_organization,
    format_region,
    format_vm_size,
)
from .iostreams import IOStreams
from .prompt import ask_multi_select, ask_select
from .providers import sorted_organizations, sorted_regions, sorted_vm_sizes

_logging = logging.getLogger(__name__)

T = TypeVar("T")

ORG_SLUG_REQUIRED = "org slug must be specified when not running interactively"
REGION_CODE_REQUIRED = "region code must be specified when not running interactively"
REGION_CODES_REQUIRED = (
    "regions codes must be specified in a comma-separated list "
    "when not running interactively"
)
VM_SIZE_REQUIRED = "vm size must be specified when not running interactively"


def select_from_list(
    session: IOStreams,
    message: str,
    items: Sequence[T],
    format_item: Callable[[T], str],
    default: str | None = None,
) -> T:
    """Prompt for one item of items and return it.

    Args:
        session: Session used for prompting
        message: Prompt message
        items: Candidates, shown in the given order
        format_item: Renders a candidate as an option label
        default: Option label selected initially

    Raises:
        SelectionError: NOT_INTERACTIVE, ABORTED from the prompt
    """
    options = [format_item(item) for item in items]
    index = ask_select(session, message, options, default)
    return items[index]


def multi_select_from_list(
    session: IOStreams,
    message: str,
    items: Sequence[T],
    format_item: Callable[[T], str],
    selected: Callable[[T], bool] | None = None,
) -> list[T]:
    """Prompt for any number of items, pre-checking those matching selected."""
    options = []
    checked = []
    for i, item in enumerate(items):
        options.append(format_item(item))
        if selected is not None and selected(item):
            checked.append(i)

    indices = ask_multi_select(session, message, options, checked)
    return [items[i] for i in indices]


def _find(items: Iterable[T], key: Callable[[T], str], value: str) -> T | None:
    return next((item for item in items if key(item) == value), None)


def _required_when_not_interactive(message: str, prompt: Callable[[], T]) -> T:
    try:
        return prompt()
    except SelectionError as e:
        if e.kind is ErrorKind.NOT_INTERACTIVE:
            raise value_required(message) from e
        raise


def select_org(session: IOStreams, orgs: Sequence[Organization]) -> Organization:
    return select_from_list(session, "Select Organization:", orgs, format_organization)


def resolve_organization(ctx: SelectionContext) -> Organization:
    """Return the organization passed via flag/config, or prompt for one."""
    orgs = sorted_organizations(ctx.client)
    slug = ctx.organization

    if slug:
        org = _find(orgs, lambda o: o.slug, slug)
        if org is None:
            raise not_found("organization", slug)
        _logging.debug(f"Using organization {slug} from flag or config")
        return org

    if len(orgs) == 1 and orgs[0].is_personal:
        org = orgs[0]
        click.echo(
            f"automatically selected {org.type.lower()} organization: {org.name}",
            file=ctx.session.stderr,
        )
        return org

    return _required_when_not_interactive(
        ORG_SLUG_REQUIRED, lambda: select_org(ctx.session, orgs)
    )


def select_region(
    session: IOStreams,
    message: str,
    regions: Sequence[Region],
    default_code: str | None = None,
) -> Region:
    default = default_option(regions, format_region, lambda r: r.code == default_code)
    return select_from_list(
        session, message or "Select region:", regions, format_region, default
    )


def multi_select_region(
    session: IOStreams,
    message: str,
    regions: Sequence[Region],
    current_codes: Iterable[str] = (),
    exclude_code: str | None = None,
) -> list[Region]:
    """Prompt for several regions.

    The excluded region is removed before the options are built; the
    returned regions are taken from that filtered list.
    """
    included = [r for r in regions if r.code != exclude_code]
    current = set(current_codes)
    return multi_select_from_list(
        session,
        message or "Select regions:",
        included,
        format_region,
        lambda r: r.code in current,
    )


def resolve_region(ctx: SelectionContext, message: str = "") -> Region:
    """Return the region passed via flag/config, or prompt for one."""
    regions, default_region = sorted_regions(ctx.client)
    code = ctx.region

    if code:
        region = _find(regions, lambda r: r.code, code)
        if region is None:
            raise not_found("region", code)
        _logging.debug(f"Using region {code} from flag or config")
        return region

    default_code = default_region.code if default_region else None
    return _required_when_not_interactive(
        REGION_CODE_REQUIRED,
        lambda: select_region(ctx.session, message, regions, default_code),
    )


def resolve_regions(
    ctx: SelectionContext,
    message: str = "",
    current_codes: Iterable[str] = (),
    exclude_code: str | None = None,
) -> list[Region]:
    """Prompt for a set of regions.

    current_codes (or the configured regions when empty) are pre-checked;
    exclude_code is left out of the options. Unchecking everything is a
    valid answer and returns an empty list.
    """
    regions, _ = sorted_regions(ctx.client)
    current = tuple(current_codes) or ctx.regions

    return _required_when_not_interactive(
        REGION_CODES_REQUIRED,
        lambda: multi_select_region(ctx.session, message, regions, current, exclude_code),
    )


def select_vm_size(session: IOStreams, sizes: Sequence[VMSize]) -> VMSize:
    return select_from_list(session, "Select VM size:", sizes, format_vm_size)


def resolve_vm_size(ctx: SelectionContext, default_name: str | None = None) -> VMSize:
    """Return the vm size named by default_name (or config), or prompt for one."""
    sizes = sorted_vm_sizes(ctx.client)
    name = default_name or ctx.vm_size

    if name:
        size = _find(sizes, lambda s: s.name, name)
        if size is None:
            raise not_found("vm size", name)
        _logging.debug(f"Using vm size {name} from flag or config")
        return size

    return _required_when_not_interactive(
        VM_SIZE_REQUIRED, lambda: select_vm_size(ctx.session, sizes)
    )


__all__ = [
    "ORG_SLUG_REQUIRED",
    "REGION_CODE_REQUIRED",
    "REGION_CODES_REQUIRED",
    "VM_SIZE_REQUIRED",
    "select_from_list",
    "multi_select_from_list",
    "select_org",
    "select_region",
    "multi_select_region",
    "select_vm_size",
    "resolve_organization",
    "resolve_region",
    "resolve_regions",
    "resolve_vm_size",
]
