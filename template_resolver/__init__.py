"""Query Template Resolution Engine.

Expands $__ macros in Log Analytics query templates.

Usage:
    from template_resolver import QueryTemplateResolver
    from core import QueryOptions, TimeRange

    resolver = QueryTemplateResolver(default_time_column="TimeGenerated")
    result = resolver.resolve("T | where $__timeFilter()", options)

The resolver dispatches each macro to a handler registered in the macro
registry. Handlers are organized by category (time, filters, interval).
"""

from template_resolver.arguments import Argument, split_arguments
from template_resolver.registry import (
    MacroCategory,
    MacroDefinition,
    MacroRegistry,
    get_registry,
    register_macro,
)
from template_resolver.resolver import QueryTemplateResolver, resolve
from template_resolver.tokenizer import tokenize

__all__ = [
    # Main API
    "QueryTemplateResolver",
    "resolve",
    # Parsing
    "Argument",
    "split_arguments",
    "tokenize",
    # Registry
    "MacroCategory",
    "MacroDefinition",
    "MacroRegistry",
    "get_registry",
    "register_macro",
]

# Import all macro modules to register them
# This happens automatically when the package is imported
from template_resolver import macros  # noqa: F401
