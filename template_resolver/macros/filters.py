"""Filter macros driven by multi-value template variables."""

import logging

from core import MacroContext, MacroInvocation
from template_resolver.arguments import split_arguments
from template_resolver.registry import MacroCategory, register_macro

logger = logging.getLogger(__name__)

MATCH_ALL = "1 == 1"
MATCH_NONE = "1 == 0"


@register_macro(
    name="contains",
    category=MacroCategory.FILTER,
    takes_arguments=True,
    description=(
        "column in (values...); collapses to 1 == 1 when the variable "
        "is set to the select-all value"
    ),
    example="Category in ('Audit','Security')",
)
def expand_contains(ctx: MacroContext, macro: MacroInvocation) -> str | None:
    """Expand $__contains(column, value1[, value2, ...]).

    Values are emitted exactly as written (quoting, order and duplicates
    kept). A single value equal to the select-all sentinel, ignoring case
    and surrounding quotes, disables the filter. No values at all matches
    nothing.
    """
    if macro.arguments is None:
        return None

    arguments = split_arguments(macro.arguments)
    if not arguments or arguments[0].is_blank:
        logger.debug("[MACRO] $__contains without a column: %r", macro.text)
        return None

    column = arguments[0].text
    values = [arg for arg in arguments[1:] if not arg.is_blank]

    if not values:
        logger.debug("[MACRO] $__contains(%s) has no values, matching nothing", column)
        return MATCH_NONE

    if len(values) == 1:
        value = values[0].unquoted.strip()
        if value.lower() == ctx.select_all_value.lower():
            return MATCH_ALL

    value_text = macro.arguments[values[0].start : values[-1].end]
    return f"{column} in ({value_text})"
