"""Macro registry and registration decorator.

This module provides the central registry for all query macros.
Macros are registered using the @register_macro decorator, which
captures metadata alongside the handler function.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core import MacroContext, MacroInvocation

# Handlers return the replacement text, or None to leave the token as-is
Handler = Callable[["MacroContext", "MacroInvocation"], str | None]


class MacroCategory(Enum):
    """Macro categories for organization and documentation."""

    TIME = auto()  # timeFilter, from, to
    FILTER = auto()  # contains
    INTERVAL = auto()  # interval


# Category display metadata for the macro listing endpoint
CATEGORY_DISPLAY = {
    MacroCategory.TIME: {"label": "Time Range"},
    MacroCategory.FILTER: {"label": "Filters"},
    MacroCategory.INTERVAL: {"label": "Interval"},
}


@dataclass(frozen=True)
class MacroDefinition:
    """Complete definition of a query macro."""

    name: str
    category: MacroCategory
    handler: Handler
    takes_arguments: bool = False
    description: str = ""
    example: str | None = None

    @property
    def token(self) -> str:
        return f"$__{self.name}"


class MacroRegistry:
    """Singleton registry for all query macros.

    Macros are registered via the @register_macro decorator.
    Lookup is case-insensitive: $__timefilter and $__timeFilter are the
    same macro.
    """

    _instance: "MacroRegistry | None" = None
    _macros: dict[str, MacroDefinition]

    def __new__(cls) -> "MacroRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._macros = {}
        return cls._instance

    def register(
        self,
        name: str,
        category: MacroCategory,
        handler: Handler,
        takes_arguments: bool = False,
        description: str = "",
        example: str | None = None,
    ) -> None:
        """Register a macro definition."""
        self._macros[name.lower()] = MacroDefinition(
            name=name,
            category=category,
            handler=handler,
            takes_arguments=takes_arguments,
            description=description,
            example=example,
        )

    def get(self, name: str) -> MacroDefinition | None:
        """Get a macro definition by name (without the $__ prefix)."""
        return self._macros.get(name.lower())

    def all_macros(self) -> list[MacroDefinition]:
        """Get all registered macros."""
        return list(self._macros.values())

    def by_category(self, category: MacroCategory) -> list[MacroDefinition]:
        """Get all macros in a category."""
        return [m for m in self._macros.values() if m.category == category]

    def count(self) -> int:
        """Get total number of registered macros."""
        return len(self._macros)

    def unregister(self, name: str) -> MacroDefinition | None:
        """Remove a macro, returning its definition if it was registered."""
        return self._macros.pop(name.lower(), None)

    def to_api_format(self) -> dict:
        """Generate the response format for the /macros endpoint."""
        macros_list = []
        categories_seen = set()

        for macro in self._macros.values():
            cat_info = CATEGORY_DISPLAY.get(
                macro.category,
                {"label": macro.category.name.title()},
            )
            categories_seen.add(cat_info["label"])
            macros_list.append(
                {
                    "name": macro.name,
                    "token": macro.token,
                    "category": cat_info["label"],
                    "description": macro.description,
                    "example": macro.example,
                    "takes_arguments": macro.takes_arguments,
                }
            )

        # Sort by category then name for consistent output
        macros_list.sort(key=lambda m: (m["category"], m["name"].lower()))

        return {
            "total_macros": len(macros_list),
            "categories": sorted(categories_seen),
            "macros": macros_list,
        }


def register_macro(
    name: str,
    category: MacroCategory,
    takes_arguments: bool = False,
    description: str = "",
    example: str | None = None,
) -> Callable[[Handler], Handler]:
    """Decorator to register a macro handler.

    Usage:
        @register_macro(
            name="from",
            category=MacroCategory.TIME,
            description="Start of the time range as a datetime literal",
            example="datetime(2024-03-01T00:00:00.000Z)",
        )
        def expand_from(ctx: MacroContext, macro: MacroInvocation) -> str | None:
            return kql_datetime(ctx.time_range.start)
    """

    def decorator(func: Handler) -> Handler:
        MacroRegistry().register(
            name, category, func, takes_arguments, description, example
        )
        return func

    return decorator


def get_registry() -> MacroRegistry:
    """Get the singleton macro registry."""
    return MacroRegistry()
