"""Region commands implementation."""

import click

from selectctl.config import split_codes
from selectctl.resolvers import resolve_region, resolve_regions

from .utils import build_context, run_resolution


@click.command(name="region")
@click.option("--region", "-r", "code", help="Region code")
@click.option("--message", "-m", default="", help="Prompt message")
@click.pass_context
def region(ctx, code: str | None, message: str):
    """Resolve a single region."""
    selected = run_resolution(
        lambda: resolve_region(build_context(ctx, region=code), message)
    )
    click.echo(selected.code)


@click.command(name="regions")
@click.option("--exclude", "-x", "exclude_code", help="Region code to leave out")
@click.option(
    "--current",
    "-c",
    "current",
    multiple=True,
    help="Region code to pre-select (repeatable, or comma-separated)",
)
@click.option("--message", "-m", default="", help="Prompt message")
@click.pass_context
def regions(ctx, exclude_code: str | None, current: tuple[str, ...], message: str):
    """Resolve a set of regions."""
    current_codes = tuple(code for value in current for code in split_codes(value))
    selected = run_resolution(
        lambda: resolve_regions(
            build_context(ctx, regions=current_codes),
            message,
            current_codes,
            exclude_code,
        )
    )
    click.echo(",".join(r.code for r in selected))
