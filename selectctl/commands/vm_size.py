"""VM size command implementation."""

import click

from selectctl.resolvers import resolve_vm_size

from .utils import build_context, run_resolution


@click.command(name="vm-size")
@click.option("--vm-size", "-s", "name", help="VM size name")
@click.pass_context
def vm_size(ctx, name: str | None):
    """Resolve the machine size."""
    selected = run_resolution(lambda: resolve_vm_size(build_context(ctx), name))
    click.echo(selected.name)
