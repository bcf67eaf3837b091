"""CLI command definitions for selectctl."""

import click

from selectctl import setup_logging
from selectctl.commands.config import config
from selectctl.commands.org import org
from selectctl.commands.region import region, regions
from selectctl.commands.vm_size import vm_size


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to config file (default: ~/.config/selectctl/config.yaml)",
)
@click.option("--catalog", type=click.Path(dir_okay=False), help="Path to platform catalog")
@click.option("--no-input", is_flag=True, help="Never prompt; fail if a value is missing")
@click.pass_context
def cli(ctx, debug, config_path, catalog, no_input):
    """Resolve organization, region and vm size selections."""
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path
    ctx.obj["catalog"] = catalog
    ctx.obj["no_input"] = no_input


# Register all commands
cli.add_command(org)
cli.add_command(region)
cli.add_command(regions)
cli.add_command(vm_size)
cli.add_command(config)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
