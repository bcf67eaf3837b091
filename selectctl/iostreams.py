"""Execution session streams and the interactivity gate."""

import io
import sys
from dataclasses import dataclass
from typing import IO, Any


@dataclass(frozen=True)
class IOStreams:
    """Input/output streams of one command invocation.

    ``never_prompt`` forces non-interactive behavior (``--no-input``) even when
    the streams are attached to a terminal.
    """

    stdin: IO[Any]
    stdout: IO[Any]
    stderr: IO[Any]
    never_prompt: bool = False

    @classmethod
    def system(cls, never_prompt: bool = False) -> "IOStreams":
        return cls(sys.stdin, sys.stdout, sys.stderr, never_prompt=never_prompt)

    def is_interactive(self) -> bool:
        return can_prompt(self)


def _is_terminal(stream: Any) -> bool:
    """Return True if stream is backed by a file descriptor attached to a TTY."""
    if stream is None:
        return False
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def can_prompt(session: IOStreams) -> bool:
    """Check whether an interactive prompt may be shown for this session.

    Both the input and output streams must be real terminals; plain files,
    pipes and in-memory buffers are refused.
    """
    if session.never_prompt:
        return False
    return _is_terminal(session.stdin) and _is_terminal(session.stdout)


__all__ = ["IOStreams", "can_prompt"]
