"""Configuration loading and validation."""

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import format_field_error


class ConfigError(Exception):
    """Raised when config loading or parsing fails.

    Syntax errors include the line and column reported by the YAML parser.
    """

    pass


@dataclass(frozen=True)
class Config:
    """Pre-set selection values read from the config file."""

    organization: str | None = None
    region: str | None = None
    vm_size: str | None = None
    regions: tuple[str, ...] = field(default_factory=tuple)
    catalog: str | None = None

    def merged(self, **overrides: Any) -> "Config":
        """Return a copy with every non-empty override applied.

        Flag values win over file values; ``None`` and empty values are ignored.
        """
        applied = {key: value for key, value in overrides.items() if value}
        if "regions" in applied:
            applied["regions"] = tuple(applied["regions"])
        return replace(self, **applied)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["regions"] = list(self.regions)
        return {key: value for key, value in data.items() if value}


def split_codes(value: str) -> tuple[str, ...]:
    """Split a comma-separated list of codes, dropping blanks.

    Examples:
        >>> split_codes("ord, ams,,cdg")
        ('ord', 'ams', 'cdg')
    """
    return tuple(code.strip() for code in value.split(",") if code.strip())


def load_yaml(path_or_text: Path | str) -> Any:
    """Load and parse YAML from a file path or raw text.

    Raises:
        ConfigError: If the file cannot be read or contains syntax errors.
        TypeError: If path_or_text is neither Path nor str.
    """
    if isinstance(path_or_text, Path):
        try:
            text = path_or_text.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"File not found: {path_or_text}")
        except PermissionError:
            raise ConfigError(f"Permission denied reading file: {path_or_text}")
        except UnicodeDecodeError:
            raise ConfigError(f"File is not valid UTF-8: {path_or_text}")
        except OSError as e:
            raise ConfigError(f"Error reading file {path_or_text}: {e}")
    elif isinstance(path_or_text, str):
        text = path_or_text
    else:
        raise TypeError(
            f"path_or_text must be Path or str, got {type(path_or_text).__name__}"
        )

    try:
        return yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        where = f" at line {mark.line + 1}, col {mark.column + 1}" if mark else ""
        raise ConfigError(f"YAML syntax error{where}: {e.problem}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error: {e}") from e


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(format_field_error("config", key, "must be a non-empty string"))
    return value.strip()


def _regions(data: dict) -> tuple[str, ...]:
    value = data.get("regions")
    if value is None:
        return ()
    if isinstance(value, str):
        return split_codes(value)
    if not isinstance(value, list) or not all(
        isinstance(code, str) and code.strip() for code in value
    ):
        raise ConfigError(format_field_error("config", "regions", "must be a list of strings"))
    return tuple(code.strip() for code in value)


def validate_config(data: Any) -> Config:
    """Validate raw parsed YAML and convert it to a Config.

    Args:
        data: Parsed YAML document, or None for an empty file

    Returns:
        Config with validated values

    Raises:
        ConfigError: If validation fails, naming the offending field
    """
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    known = {"organization", "region", "vm_size", "regions", "catalog"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config field(s): {', '.join(map(str, unknown))}")

    return Config(
        organization=_optional_str(data, "organization"),
        region=_optional_str(data, "region"),
        vm_size=_optional_str(data, "vm_size"),
        regions=_regions(data),
        catalog=_optional_str(data, "catalog"),
    )


def load_config(path: Path) -> Config:
    """Load the config file at path; a missing file yields an empty Config."""
    if not path.exists():
        return Config()
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")
    try:
        return validate_config(load_yaml(path))
    except ConfigError as e:
        raise ConfigError(f"Failed to load config file {path}: {e}") from e


__all__ = [
    "ConfigError",
    "Config",
    "split_codes",
    "load_yaml",
    "validate_config",
    "load_config",
]
