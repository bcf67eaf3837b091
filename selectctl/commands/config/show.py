"""Config show command implementation."""

import sys

import click
import yaml

from selectctl.config import ConfigError
from selectctl.errors import format_error
from selectctl.paths import get_catalog_path, get_config_path

from ..utils import EXIT_CONFIG_ERROR, load_effective_config


@click.command(name="show")
@click.pass_context
def show(ctx):
    """Print the effective configuration as YAML."""
    try:
        config = load_effective_config(ctx)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    data = config.to_dict()
    data["config_path"] = str(ctx.obj.get("config_path") or get_config_path())
    data["catalog"] = str(get_catalog_path(ctx.obj.get("catalog"), config.catalog))
    click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)
