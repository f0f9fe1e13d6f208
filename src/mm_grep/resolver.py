"""Expand command-line paths into the ordered list of files to scan.

Paths stay plain strings so they print exactly as given (``./a.txt`` is not
shortened to ``a.txt``); files found by a walk are joined onto that text.
"""

import os
import stat
from collections.abc import Callable, Iterable, Iterator

from loguru import logger

from .errors import NotAFileError, NotFoundError, OpenError, SearchError

ErrorHandler = Callable[[SearchError], None]


def _raise(error: SearchError) -> None:
    raise error


def stat_path(path: str) -> os.stat_result:
    """Stat ``path`` following symlinks.

    Raises:
        NotFoundError: Nothing exists at ``path`` (including the empty string).
        OpenError: Any other failure, e.g. a name too long or a parent without search permission.

    """
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError(path) from e
    except OSError as e:
        raise OpenError(path, e) from e


def resolve_paths(paths: Iterable[str], *, recursive: bool, on_error: ErrorHandler = _raise) -> Iterator[str]:
    """Yield every regular file reachable from ``paths``, in order.

    Files are yielded as given. Directories are walked depth-first in name
    order when ``recursive`` is set. Symlinks are followed; a directory
    already visited on the current walk is skipped, which breaks cycles.

    Args:
        paths: Input paths in command-line order.
        recursive: Descend into directories instead of rejecting them.
        on_error: Called with a ``SearchError`` for each path that can't be
            resolved; resolution then continues with the next path.
            Defaults to raising the error.

    """
    for path in paths:
        try:
            mode = stat_path(path).st_mode
        except SearchError as e:
            on_error(e)
            continue
        if stat.S_ISREG(mode):
            yield path
        elif stat.S_ISDIR(mode):
            if recursive:
                yield from walk_files(path, on_error=on_error)
            else:
                on_error(NotAFileError(path))
        else:
            on_error(NotAFileError(path, "not a regular file"))


def walk_files(root: str, *, on_error: ErrorHandler = _raise) -> Iterator[str]:
    """Yield regular files under ``root`` depth-first, entries sorted by name."""
    visited: set[tuple[int, int]] = set()
    # remaining entries per open directory, reversed so pop() yields name order
    stack: list[list[str]] = []

    def enter(directory: str, st: os.stat_result) -> None:
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug("skipping already visited directory {}", directory)
            return
        visited.add(key)
        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            on_error(OpenError(directory, e))
            return
        stack.append([os.path.join(directory, name) for name in reversed(names)])

    try:
        enter(root, stat_path(root))
    except SearchError as e:
        on_error(e)

    while stack:
        entries = stack[-1]
        if not entries:
            stack.pop()
            continue
        entry = entries.pop()
        try:
            st = stat_path(entry)
        except NotFoundError:
            logger.debug("skipping broken symlink or vanished entry {}", entry)
            continue
        except SearchError as e:
            on_error(e)
            continue
        if stat.S_ISDIR(st.st_mode):
            enter(entry, st)
        elif stat.S_ISREG(st.st_mode):
            logger.debug("resolved {}", entry)
            yield entry
        else:
            logger.debug("skipping non-regular entry {}", entry)
