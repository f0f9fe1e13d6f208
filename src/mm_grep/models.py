"""Search request and per-line result models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """Matching and display modifiers for one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    case_insensitive: bool = False
    invert_match: bool = False
    show_line_numbers: bool = False
    recursive: bool = False
    show_filename: bool = False
    colorize: bool = False


class SearchRequest(BaseModel):
    """A fully parsed invocation: what to look for, where, and how.

    ``pattern`` may be empty, in which case every line matches. ``paths`` keep
    the exact text given on the command line.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str
    paths: tuple[str, ...] = Field(min_length=1)
    options: SearchOptions = SearchOptions()


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching a single line."""

    line_number: int
    raw_text: str
    matched: bool  # after invert is applied, i.e. "report this line"
    display_text: str
