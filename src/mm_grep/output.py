"""Plain stdout/stderr printing for matched lines and errors."""

# ruff: noqa: T201 -- output layer

import os
import sys


def display_path(path: str) -> str:
    """Render a filesystem path for printing.

    Names that aren't valid UTF-8 arrive from the OS as surrogate escapes,
    which can't be encoded to stdout; the undecodable bytes become U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", errors="replace")


def print_plain(*messages: object) -> None:
    """Print messages to stdout, separated by spaces."""
    print(*messages)


def print_error(message: str) -> None:
    """Print an ``Error:`` line to stderr."""
    print(f"Error: {message}", file=sys.stderr)
