"""Query macro handlers.

Each module in this package defines macro handlers using the
@register_macro decorator. Macros are organized by category:

- time: timeFilter, from, to
- filters: contains
- interval: interval

Import this module to register all macros with the registry.
"""

from template_resolver.registry import MacroCategory, get_registry

# Import all macro modules to trigger registration (noqa: F401 for side-effect imports)
from template_resolver.macros import (  # noqa: F401
    filters,
    interval,
    time,
)

__all__ = ["MacroCategory", "get_registry"]
