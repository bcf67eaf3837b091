"""Config command group."""

import click

from .show import show


@click.group()
def config():
    """Inspect selectctl configuration."""
    pass


config.add_command(show)
