"""Organization command implementation."""

import click

from selectctl.formatters import format_organization
from selectctl.resolvers import resolve_organization

from .utils import build_context, run_resolution


@click.command(name="org")
@click.option("--org", "-o", "slug", help="Organization slug")
@click.pass_context
def org(ctx, slug: str | None):
    """Resolve the organization to operate on."""
    selected = run_resolution(
        lambda: resolve_organization(build_context(ctx, organization=slug))
    )
    click.echo(format_organization(selected))
