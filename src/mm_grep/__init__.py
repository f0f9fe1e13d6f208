"""Literal-string search over files, a minimal grep."""

from loguru import logger

from .errors import NotAFileError as NotAFileError
from .errors import NotFoundError as NotFoundError
from .errors import OpenError as OpenError
from .errors import ReadError as ReadError
from .errors import SearchError as SearchError
from .errors import UsageError as UsageError
from .matcher import LineMatcher as LineMatcher
from .matcher import format_line as format_line
from .models import MatchResult as MatchResult
from .models import SearchOptions as SearchOptions
from .models import SearchRequest as SearchRequest
from .resolver import resolve_paths as resolve_paths
from .runner import SearchRunner as SearchRunner
from .runner import run_search as run_search

logger.disable("mm_grep")
