"""Drive a search: resolve paths, scan each file, print reported lines."""

from loguru import logger

from .errors import OpenError, ReadError, SearchError
from .matcher import LineMatcher, format_line
from .models import SearchRequest
from .output import print_error, print_plain
from .resolver import resolve_paths


class SearchRunner:
    """Runs one ``SearchRequest`` and tracks whether every path succeeded."""

    def __init__(self, request: SearchRequest) -> None:
        self.request = request
        self.matcher = LineMatcher(request.pattern, request.options)
        self.errors: list[SearchError] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    def report(self, error: SearchError) -> None:
        """Record a per-path error and print it to stderr."""
        self.errors.append(error)
        print_error(str(error))

    def run(self) -> bool:
        """Scan every resolved file. Returns True if no path failed."""
        for path in resolve_paths(self.request.paths, recursive=self.request.options.recursive, on_error=self.report):
            try:
                count = self.scan_file(path)
            except SearchError as e:
                self.report(e)
            else:
                logger.debug("{}: {} line(s) reported", path, count)
        return self.ok

    def scan_file(self, path: str) -> int:
        """Print reported lines of one file as they are read. Returns how many were printed.

        Lines end at a newline only. A carriage return right before the newline is dropped;
        any other carriage return is part of the line.

        Raises:
            OpenError: The file can't be opened.
            ReadError: Reading or decoding failed after the file was opened.

        """
        options = self.request.options
        try:
            f = open(path, encoding="utf-8", newline="\n")  # noqa: SIM115, PTH123 -- closed by the with below
        except OSError as e:
            raise OpenError(path, e) from e

        count = 0
        with f:
            try:
                for line_number, line in enumerate(f, start=1):
                    if line.endswith("\n"):
                        line = line[:-1].removesuffix("\r")  # noqa: PLW2901
                    result = self.matcher.match(line_number, line)
                    if result.matched:
                        print_plain(format_line(path, result, options))
                        count += 1
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(path, e) from e
        return count


def run_search(request: SearchRequest) -> bool:
    """Run a search and return True when every path was scanned without error."""
    logger.debug("search request: {}", request)
    return SearchRunner(request).run()
