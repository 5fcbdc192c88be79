"""Time range macros: time filter and range boundaries.

Datetime literals are always UTC with millisecond precision, so the same
dashboard range produces the same query text in every timezone.
"""

from core import MacroContext, MacroInvocation
from loganalytics.utilities.tz import kql_datetime
from template_resolver.registry import MacroCategory, register_macro

NOW_FUNCTION = "now()"


@register_macro(
    name="timeFilter",
    category=MacroCategory.TIME,
    takes_arguments=True,
    description=(
        "Lower-bound time condition on a datetime column "
        "(defaults to the configured time column)"
    ),
    example="TimeGenerated >= datetime(2024-03-01T00:00:00.000Z)",
)
def expand_time_filter(ctx: MacroContext, macro: MacroInvocation) -> str | None:
    column = (macro.arguments or "").strip() or ctx.default_time_column
    return f"{column} >= {kql_datetime(ctx.time_range.start)}"


@register_macro(
    name="from",
    category=MacroCategory.TIME,
    description="Start of the time range as a datetime literal",
    example="datetime(2024-03-01T00:00:00.000Z)",
)
def expand_from(ctx: MacroContext, macro: MacroInvocation) -> str | None:
    return kql_datetime(ctx.time_range.start)


@register_macro(
    name="to",
    category=MacroCategory.TIME,
    description="End of the time range; now() while the range ends at 'now'",
    example="now()",
)
def expand_to(ctx: MacroContext, macro: MacroInvocation) -> str | None:
    # A live range must stay anchored to execution time, not build time
    if ctx.time_range.is_live:
        return NOW_FUNCTION
    return kql_datetime(ctx.time_range.end)
