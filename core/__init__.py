"""Core types for the query macro resolver.

All data structures are dataclasses with attribute access.
"""

from core.types import (
    MacroContext,
    MacroInvocation,
    QueryOptions,
    ResolutionResult,
    Span,
    TextSpan,
    TimeRange,
)

__all__ = [
    "MacroContext",
    "MacroInvocation",
    "QueryOptions",
    "ResolutionResult",
    "Span",
    "TextSpan",
    "TimeRange",
]
