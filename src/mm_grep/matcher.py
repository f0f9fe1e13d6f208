"""Literal substring matching, highlighting, and line formatting."""

from collections.abc import Iterator

from rich.color import ColorSystem
from rich.style import Style

from .models import MatchResult, SearchOptions
from .output import display_path

HIGHLIGHT_STYLE = Style(color="red")


def fold_case(text: str) -> str:
    """Lowercase ``text`` without changing its length.

    Characters whose lowercase form is longer than one character (e.g. ``İ``)
    are kept as-is, so offsets in the folded string are valid in the original.
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(low if len(low := ch.lower()) == 1 else ch for ch in text)


def highlight(text: str) -> str:
    """Wrap ``text`` in the ANSI red-foreground sequence."""
    return HIGHLIGHT_STYLE.render(text, color_system=ColorSystem.STANDARD)


class LineMatcher:
    """Decides which lines to report and how they are displayed."""

    def __init__(self, pattern: str, options: SearchOptions) -> None:
        self.pattern = pattern
        self.options = options
        self._needle = fold_case(pattern) if options.case_insensitive else pattern

    def _haystack(self, line: str) -> str:
        return fold_case(line) if self.options.case_insensitive else line

    def contains(self, line: str) -> bool:
        """Check whether the pattern occurs in ``line``, ignoring invert mode."""
        return self._needle in self._haystack(line)

    def find_spans(self, line: str) -> Iterator[tuple[int, int]]:
        """Yield ``(start, end)`` of each non-overlapping occurrence, left to right."""
        if not self._needle:
            return
        haystack = self._haystack(line)
        size = len(self._needle)
        start = haystack.find(self._needle)
        while start != -1:
            yield start, start + size
            start = haystack.find(self._needle, start + size)

    def highlight_line(self, line: str) -> str:
        """Return ``line`` with every occurrence of the pattern coloured."""
        parts: list[str] = []
        pos = 0
        for start, end in self.find_spans(line):
            parts.append(line[pos:start])
            parts.append(highlight(line[start:end]))
            pos = end
        parts.append(line[pos:])
        return "".join(parts)

    def match(self, line_number: int, line: str) -> MatchResult:
        """Match one line; ``matched`` on the result means "report it"."""
        found = self.contains(line)
        report = found != self.options.invert_match
        if report and found and self.options.colorize:
            display = self.highlight_line(line)
        else:
            display = line
        return MatchResult(line_number=line_number, raw_text=line, matched=report, display_text=display)


def format_line(path: str, result: MatchResult, options: SearchOptions) -> str:
    """Prefix a reported line with ``path:`` and/or ``line_number:`` as requested."""
    parts: list[str] = []
    if options.show_filename:
        parts.append(display_path(path))
    if options.show_line_numbers:
        parts.append(str(result.line_number))
    parts.append(result.display_text)
    return ":".join(parts)
