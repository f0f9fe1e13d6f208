"""Per-path error hierarchy.

Invocation errors are ``click.UsageError`` and are raised by the CLI layer;
everything here is scoped to a single path and never aborts the whole run.
Paths are kept exactly as the user typed them (or as joined during a walk).
"""

from click import UsageError as UsageError

from .output import display_path


class SearchError(Exception):
    """Base for errors tied to one path."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{display_path(path)}: {message}")
        self.path = path
        self.message = message


class NotFoundError(SearchError):
    """Path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "no such file or directory")


class NotAFileError(SearchError):
    """Path exists but is not something to scan: a directory without -r, a device, a FIFO."""

    def __init__(self, path: str, reason: str = "is a directory (use -r to search it)") -> None:
        super().__init__(path, reason)


class OpenError(SearchError):
    """File or directory could not be opened or inspected."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(path, f"can't open: {cause.strerror or cause}")


class ReadError(SearchError):
    """File was opened but reading it failed part way."""

    def __init__(self, path: str, cause: Exception) -> None:
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else str(cause)
        super().__init__(path, f"can't read: {reason}")
