"""Error taxonomy and message formatting for selectctl.

Every failure raised by the resolution layer is a ``SelectionError`` carrying
an ``ErrorKind``. Callers match on the kind instead of on exception subclasses:

    try:
        org = resolve_organization(ctx)
    except SelectionError as e:
        if e.kind is ErrorKind.NOT_FOUND:
            ...

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Name the offending value: 'region xyz not found'
- Use present tense: 'must be specified', 'is required'
- Include actionable hints where helpful
"""

from enum import Enum


class ErrorKind(Enum):
    """Discriminant for ``SelectionError``."""

    FETCH_FAILED = "fetch_failed"
    NOT_INTERACTIVE = "not_interactive"
    VALUE_REQUIRED = "value_required"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    ABORTED = "aborted"
    NO_OPTIONS = "no_options"


class SelectionError(Exception):
    """Raised when a selection cannot be resolved."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"SelectionError({self.message!r}, {self.kind})"


def fetch_failed(message: str) -> SelectionError:
    return SelectionError(message, ErrorKind.FETCH_FAILED)


def not_interactive() -> SelectionError:
    return SelectionError("prompt: non interactive", ErrorKind.NOT_INTERACTIVE)


def value_required(message: str) -> SelectionError:
    return SelectionError(message, ErrorKind.VALUE_REQUIRED)


def not_found(resource: str, value: str) -> SelectionError:
    """Build a NOT_FOUND error naming the missing value.

    Examples:
        >>> str(not_found("region", "xyz"))
        'region xyz not found'
    """
    return SelectionError(f"{resource} {value} not found", ErrorKind.NOT_FOUND)


def validation_failed(message: str) -> SelectionError:
    return SelectionError(message, ErrorKind.VALIDATION_FAILED)


def aborted() -> SelectionError:
    return SelectionError("prompt cancelled by user", ErrorKind.ABORTED)


def no_options() -> SelectionError:
    return SelectionError("please provide options to select from", ErrorKind.NO_OPTIONS)


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("organization acme not found")
        'Error: organization acme not found'
    """
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Format a field validation error with structured format.

    Examples:
        >>> format_field_error("config", "regions", "must be a list of strings")
        "config field 'regions' must be a list of strings"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("region code must be specified", "pass --region")
        'Error: region code must be specified. Hint: pass --region'
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "ErrorKind",
    "SelectionError",
    "fetch_failed",
    "not_interactive",
    "value_required",
    "not_found",
    "validation_failed",
    "aborted",
    "no_options",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
