"""Interval macro: the dashboard's auto interval, e.g. for bin()."""

from core import MacroContext, MacroInvocation
from template_resolver.registry import MacroCategory, register_macro


@register_macro(
    name="interval",
    category=MacroCategory.INTERVAL,
    description="Query interval, substituted verbatim (e.g. '5m')",
    example="bin(TimeGenerated, 5m)",
)
def expand_interval(ctx: MacroContext, macro: MacroInvocation) -> str | None:
    return ctx.options.interval
