"""Configuration path helpers for selectctl."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/selectctl"""
    return Path.home() / ".config" / "selectctl"


def get_packaged_catalog_path() -> Path:
    """Return path to the packaged sample catalog"""
    return Path(__file__).parent / "data" / "catalog.yaml"


def get_config_path() -> Path:
    """Return path to user config file.

    Priority:
    1. SELECTCTL_CONFIG environment variable (if set)
    2. ~/.config/selectctl/config.yaml (default XDG location)
    """
    if "SELECTCTL_CONFIG" in os.environ:
        return Path(os.environ["SELECTCTL_CONFIG"])
    return get_config_dir() / "config.yaml"


def get_catalog_path(flag: str | None = None, configured: str | None = None) -> Path:
    """Return path to the platform catalog file.

    Priority:
    1. --catalog flag
    2. SELECTCTL_CATALOG environment variable
    3. ``catalog`` field of the config file
    4. ~/.config/selectctl/catalog.yaml, if it exists
    5. the packaged sample catalog
    """
    if flag:
        return Path(flag).expanduser()
    if "SELECTCTL_CATALOG" in os.environ:
        return Path(os.environ["SELECTCTL_CATALOG"]).expanduser()
    if configured:
        return Path(configured).expanduser()
    user_catalog = get_config_dir() / "catalog.yaml"
    if user_catalog.exists():
        return user_catalog
    return get_packaged_catalog_path()
