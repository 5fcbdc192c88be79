"""Query template resolver.

Expands $__ macros in a Log Analytics query template, then URI-encodes
the result once. Expansion is a single left-to-right pass: text produced
by a macro is never scanned for further macros, and macros inside another
macro's arguments are expanded before that macro sees them, so resolving
an already-resolved query changes nothing.
"""

import logging
from collections.abc import Iterator
from dataclasses import replace

from core import (
    MacroContext,
    MacroInvocation,
    QueryOptions,
    ResolutionResult,
    Span,
    TextSpan,
)
from loganalytics.config import (
    DEFAULT_SELECT_ALL_VALUE,
    DEFAULT_TIME_COLUMN,
    ResolverSettings,
    get_settings,
)
from loganalytics.utilities.encoding import encode_uri_component
from loganalytics.utilities.tz import format_iso_utc
from template_resolver.registry import MacroRegistry, get_registry
from template_resolver.tokenizer import MACRO_PREFIX, Tokenizer

logger = logging.getLogger(__name__)


class QueryTemplateResolver:
    """Resolves macros in query templates.

    Holds only construction-time configuration; the template, time range
    and interval arrive with each resolve() call, so one instance can be
    shared freely.

    Usage:
        resolver = QueryTemplateResolver(default_time_column="TimeGenerated")
        result = resolver.resolve("Heartbeat | where $__timeFilter()", options)
        result.raw_query   # Heartbeat | where TimeGenerated >= datetime(...)
        result.uri_string  # Heartbeat%20%7C%20where%20...
    """

    def __init__(
        self,
        default_time_column: str = DEFAULT_TIME_COLUMN,
        select_all_value: str = DEFAULT_SELECT_ALL_VALUE,
        registry: MacroRegistry | None = None,
    ):
        self.default_time_column = default_time_column
        self.select_all_value = select_all_value
        self._registry = registry or get_registry()

    @classmethod
    def from_settings(
        cls, settings: ResolverSettings | None = None
    ) -> "QueryTemplateResolver":
        """Build a resolver from configuration (defaults to get_settings())."""
        settings = settings or get_settings()
        return cls(
            default_time_column=settings.default_time_column,
            select_all_value=settings.select_all_value,
        )

    def resolve(self, template: str, options: QueryOptions) -> ResolutionResult:
        """Resolve all macros and return the raw and URI-encoded query."""
        raw_query = self.expand(template, options)
        return ResolutionResult(
            raw_query=raw_query,
            uri_string=encode_uri_component(raw_query),
        )

    def expand(self, template: str, options: QueryOptions) -> str:
        """Resolve all macros, returning only the raw query text."""
        if not template:
            return ""

        time_range = options.time_range
        if time_range.is_inverted:
            logger.warning(
                "[RESOLVE] Time range is inverted: from=%s to=%s",
                format_iso_utc(time_range.start),
                format_iso_utc(time_range.end),
            )

        ctx = MacroContext(
            options=options,
            default_time_column=self.default_time_column,
            select_all_value=self.select_all_value,
        )
        tokenizer = Tokenizer(template, self._takes_arguments)
        macro_count = 0

        # Each frame collects the expanded text of one region: the whole
        # template, or the arguments of a macro waiting to be expanded.
        # Nesting is handled with this stack rather than recursion.
        stack: list[tuple[Iterator[Span], list[str], MacroInvocation | None]] = [
            (iter(tokenizer.spans()), [], None)
        ]
        while True:
            spans, parts, pending = stack[-1]
            span = next(spans, None)

            if span is None:
                stack.pop()
                text = "".join(parts)
                if pending is None:
                    break
                stack[-1][1].append(self._expand_macro(pending, text, ctx))
                continue

            if isinstance(span, TextSpan):
                parts.append(span.text)
                continue

            macro_count += 1
            if span.has_arguments:
                args_end = span.end - 1
                args_start = args_end - len(span.arguments)
                stack.append((iter(tokenizer.spans(args_start, args_end)), [], span))
            else:
                parts.append(self._expand_macro(span, None, ctx))

        logger.debug(
            "[RESOLVE] Expanded %d macro(s) in %d-char template",
            macro_count,
            len(template),
        )
        return text

    def _takes_arguments(self, name: str) -> bool:
        definition = self._registry.get(name)
        return definition is not None and definition.takes_arguments

    def _expand_macro(
        self, macro: MacroInvocation, arguments: str | None, ctx: MacroContext
    ) -> str:
        """Expand one macro whose arguments (if any) are already expanded."""
        token = MACRO_PREFIX + macro.name
        if arguments is not None:
            macro = replace(macro, arguments=arguments, text=f"{token}({arguments})")

        definition = self._registry.get(macro.name)
        if definition is None:
            logger.debug("[MACRO] Unknown macro %s left as-is", token)
            return macro.text

        value = definition.handler(ctx, macro)
        if value is None:
            return macro.text
        return value


def resolve(
    template: str,
    options: QueryOptions,
    default_time_column: str = DEFAULT_TIME_COLUMN,
    select_all_value: str = DEFAULT_SELECT_ALL_VALUE,
) -> ResolutionResult:
    """Convenience function to resolve a template in one call.

    Args:
        template: Query text with $__ macros
        options: Time range and interval for this resolution
        default_time_column: Column for $__timeFilter without arguments
        select_all_value: Multi-value option meaning 'no filter'

    Returns:
        ResolutionResult with raw_query and uri_string
    """
    resolver = QueryTemplateResolver(
        default_time_column=default_time_column,
        select_all_value=select_all_value,
    )
    return resolver.resolve(template, options)
