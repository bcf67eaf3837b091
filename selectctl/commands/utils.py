"""Shared helpers for commands."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from selectctl.api import CatalogClient
from selectctl.config import Config, ConfigError, load_config
from selectctl.context import SelectionContext
from selectctl.errors import ErrorKind, SelectionError, format_error, format_suggestion
from selectctl.iostreams import IOStreams
from selectctl.paths import get_catalog_path, get_config_path

_logging = logging.getLogger(__name__)

T = TypeVar("T")

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 3
EXIT_CONFIG_ERROR = 4
EXIT_VALUE_REQUIRED = 5
EXIT_ABORTED = 130

_EXIT_CODES = {
    ErrorKind.NOT_FOUND: EXIT_NOT_FOUND,
    ErrorKind.VALUE_REQUIRED: EXIT_VALUE_REQUIRED,
    ErrorKind.NOT_INTERACTIVE: EXIT_VALUE_REQUIRED,
    ErrorKind.ABORTED: EXIT_ABORTED,
}

_HINTS = {
    ErrorKind.VALUE_REQUIRED: "pass the value as a flag or set it in the config file",
}


def exit_code_for(error: SelectionError) -> int:
    return _EXIT_CODES.get(error.kind, EXIT_FAILURE)


def load_effective_config(ctx: click.Context, **overrides) -> Config:
    """Load the config file and apply flag overrides on top of it."""
    path = ctx.obj.get("config_path") or get_config_path()
    config = load_config(Path(path))
    return config.merged(**overrides)


def build_context(ctx: click.Context, **overrides) -> SelectionContext:
    """Build the SelectionContext for this invocation from config and flags."""
    config = load_effective_config(ctx, **overrides)
    catalog = get_catalog_path(ctx.obj.get("catalog"), config.catalog)
    _logging.debug(f"Using catalog {catalog}")
    session = IOStreams.system(never_prompt=ctx.obj.get("no_input", False))
    return SelectionContext.from_config(session, CatalogClient(catalog), config)


def run_resolution(resolve: Callable[[], T]) -> T:
    """Run a resolver, exiting with a mapped code on failure."""
    try:
        return resolve()
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except SelectionError as e:
        hint = _HINTS.get(e.kind)
        if hint:
            click.echo(format_suggestion(e.message, hint), err=True)
        else:
            click.echo(format_error(e.message), err=True)
        sys.exit(exit_code_for(e))
