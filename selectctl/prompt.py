"""Prompt primitives bound to the session's streams.

Thin adapter over questionary. Every primitive:
- checks the interactivity gate on each call (never cached)
- raises ``SelectionError(NOT_INTERACTIVE)`` when prompting is impossible
- raises ``SelectionError(ABORTED)`` when the user cancels (Ctrl+C)
- select primitives raise ``SelectionError(NO_OPTIONS)`` for an empty option
  list, after the interactivity check
- raises ``SelectionError(VALIDATION_FAILED)`` when the submitted answer fails
  its typed validator
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

import questionary
from prompt_toolkit.input import create_input
from prompt_toolkit.output import create_output

from .errors import (
    SelectionError,
    aborted,
    no_options,
    not_interactive,
    validation_failed,
)
from .iostreams import IOStreams, can_prompt

_logging = logging.getLogger(__name__)

PAGE_SIZE = 15


def require_value(value: str) -> str:
    """Reject empty answers."""
    if not value:
        raise validation_failed("Value is required")
    return value


def parse_int(value: str) -> int:
    """Parse an integer answer.

    Examples:
        >>> parse_int("12")
        12
    """
    try:
        return int(value)
    except ValueError:
        raise validation_failed("must be an integer") from None


def _as_validator(check: Callable[[str], Any]) -> Callable[[str], bool | str]:
    """Wrap a typed validator for questionary's inline validation."""

    def validate(value: str) -> bool | str:
        try:
            check(value)
        except SelectionError as e:
            return str(e)
        return True

    return validate


def _chain(*checks: Callable[[str], Any]) -> Callable[[str], None]:
    def check(value: str) -> None:
        for c in checks:
            c(value)

    return check


def _stdio(session: IOStreams) -> dict[str, Any]:
    """Bind prompt_toolkit to the session streams, or fail if not interactive."""
    if not can_prompt(session):
        raise not_interactive()
    return {
        "input": create_input(session.stdin),
        "output": create_output(session.stdout),
    }


def _ask(question: "questionary.Question") -> Any:
    try:
        answer = question.unsafe_ask()
    except KeyboardInterrupt:
        raise aborted() from None
    if answer is None:
        raise aborted()
    return answer


def ask_text(
    session: IOStreams, message: str, default: str = "", required: bool = False
) -> str:
    stdio = _stdio(session)
    checks = [require_value] if required else []
    answer = _ask(
        questionary.text(
            message,
            default=default,
            validate=_as_validator(_chain(*checks)) if checks else None,
            **stdio,
        )
    )
    for check in checks:
        check(answer)
    return answer


def ask_int(
    session: IOStreams, message: str, default: int = 0, required: bool = False
) -> int:
    """Prompt for an integer.

    The answer is validated inline while typing, and parsed again after
    submission so an unparsable string is never returned.
    """
    stdio = _stdio(session)
    checks: list[Callable[[str], Any]] = [require_value] if required else []
    checks.append(parse_int)
    answer = _ask(
        questionary.text(
            message,
            default=str(default),
            validate=_as_validator(_chain(*checks)),
            **stdio,
        )
    )
    if required:
        require_value(answer)
    return parse_int(answer)


def ask_secret(session: IOStreams, message: str, required: bool = False) -> str:
    stdio = _stdio(session)
    answer = _ask(
        questionary.password(
            message,
            validate=_as_validator(require_value) if required else None,
            **stdio,
        )
    )
    if required:
        require_value(answer)
    return answer


def ask_confirm(session: IOStreams, message: str, default: bool = False) -> bool:
    stdio = _stdio(session)
    return bool(_ask(questionary.confirm(message, default=default, **stdio)))


def confirm_overwrite(session: IOStreams, filename: str) -> bool:
    return ask_confirm(session, f'Overwrite "{filename}"?')


def ask_select(
    session: IOStreams,
    message: str,
    options: Sequence[str],
    default_option: str | None = None,
) -> int:
    """Show a single-choice list and return the chosen index.

    Args:
        session: Session whose streams are used
        message: Prompt message
        options: Option labels, displayed in order
        default_option: Label to highlight initially, if present in options

    Returns:
        Index into options
    """
    stdio = _stdio(session)
    if not options:
        raise no_options()
    choices = [questionary.Choice(title=label, value=i) for i, label in enumerate(options)]

    default = None
    if default_option and default_option in options:
        default = options.index(default_option)

    index = _ask(
        questionary.select(
            message,
            choices=choices,
            default=default,
            use_search_filter=len(options) > PAGE_SIZE,
            use_jk_keys=len(options) <= PAGE_SIZE,
            **stdio,
        )
    )
    _logging.debug(f"Selected option {index} of {len(options)}")
    return index


def ask_multi_select(
    session: IOStreams,
    message: str,
    options: Sequence[str],
    default_indices: Sequence[int] = (),
) -> list[int]:
    """Show a checkbox list and return the chosen indices in option order."""
    stdio = _stdio(session)
    if not options:
        raise no_options()
    checked = set(default_indices)
    choices = [
        questionary.Choice(title=label, value=i, checked=i in checked)
        for i, label in enumerate(options)
    ]

    selected = _ask(
        questionary.checkbox(
            message,
            choices=choices,
            instruction="Space to toggle, Enter to confirm",
            **stdio,
        )
    )
    indices = sorted(set(selected))
    _logging.debug(f"Selected options {indices} of {len(options)}")
    return indices


__all__ = [
    "PAGE_SIZE",
    "require_value",
    "parse_int",
    "ask_text",
    "ask_int",
    "ask_secret",
    "ask_confirm",
    "confirm_overwrite",
    "ask_select",
    "ask_multi_select",
]
