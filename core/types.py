"""Core data types for query template resolution.

All data structures are pure dataclasses with attribute access.
Nothing here holds mutable state between resolutions: a resolver receives
a fresh QueryOptions value on every call.
"""

from dataclasses import dataclass
from datetime import datetime

# Raw "to" expression meaning the live end of a relative range
LIVE_RANGE_END = "now"


@dataclass(frozen=True)
class TimeRange:
    """Dashboard time range.

    start/end are absolute instants; raw_from/raw_to keep the relative
    expressions they were computed from (e.g. "now-24h", "now").
    """

    start: datetime
    end: datetime
    raw_from: str = ""
    raw_to: str = ""

    @property
    def is_live(self) -> bool:
        """True when the range ends at "now" and keeps advancing."""
        return self.raw_to.strip().lower() == LIVE_RANGE_END

    @property
    def is_inverted(self) -> bool:
        return self.start > self.end


@dataclass(frozen=True)
class QueryOptions:
    """Per-call inputs for a resolution."""

    time_range: TimeRange
    interval: str = ""


@dataclass(frozen=True)
class TextSpan:
    """Plain template text between macros."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class MacroInvocation:
    """A `$__name` or `$__name(args)` occurrence in a template.

    arguments is None when the macro had no parentheses, and the raw text
    between the parentheses otherwise (possibly empty).
    """

    name: str
    arguments: str | None
    start: int
    end: int
    text: str  # exact source text, e.g. "$__contains(col, 'a')"

    @property
    def has_arguments(self) -> bool:
        return self.arguments is not None


Span = TextSpan | MacroInvocation


@dataclass(frozen=True)
class ResolutionResult:
    """Output of a resolution: the raw query and its URI-encoded form."""

    raw_query: str
    uri_string: str


@dataclass(frozen=True)
class MacroContext:
    """Everything a macro handler may read while expanding one invocation."""

    options: QueryOptions
    default_time_column: str
    select_all_value: str

    @property
    def time_range(self) -> TimeRange:
        return self.options.time_range
