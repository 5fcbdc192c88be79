"""Tests for the macro registry and custom macro registration."""

import pytest

from core import QueryOptions
from template_resolver import (
    MacroCategory,
    MacroRegistry,
    QueryTemplateResolver,
    get_registry,
    register_macro,
)


@pytest.fixture
def tenant_macro():
    """Register a $__tenant macro for the duration of a test."""

    @register_macro(
        name="tenant",
        category=MacroCategory.FILTER,
        description="Current tenant name",
    )
    def expand_tenant(ctx, macro):
        return "'contoso'"

    yield expand_tenant
    get_registry().unregister("tenant")


class TestMacroRegistry:
    """Registry lookup and introspection."""

    def test_singleton(self):
        assert MacroRegistry() is get_registry()

    def test_builtin_macros_registered(self):
        registry = get_registry()
        for name in ("timeFilter", "contains", "interval", "from", "to"):
            assert registry.get(name) is not None, name

    def test_lookup_is_case_insensitive(self):
        definition = get_registry().get("TIMEFILTER")
        assert definition is not None
        assert definition.name == "timeFilter"
        assert definition.token == "$__timeFilter"

    def test_unknown_macro(self):
        assert get_registry().get("escapeMulti") is None

    def test_by_category(self):
        names = {m.name for m in get_registry().by_category(MacroCategory.TIME)}
        assert names == {"timeFilter", "from", "to"}

    def test_argument_taking_macros(self):
        registry = get_registry()
        assert registry.get("contains").takes_arguments
        assert registry.get("timeFilter").takes_arguments
        assert not registry.get("interval").takes_arguments

    def test_api_format(self):
        data = get_registry().to_api_format()
        assert data["total_macros"] == get_registry().count()
        assert data["categories"] == sorted(data["categories"])
        contains = next(m for m in data["macros"] if m["name"] == "contains")
        assert contains["token"] == "$__contains"
        assert contains["category"] == "Filters"
        assert contains["takes_arguments"] is True


    def test_unregister(self):
        @register_macro(name="scratch", category=MacroCategory.FILTER)
        def expand_scratch(ctx, macro):
            return "x"

        registry = get_registry()
        definition = registry.unregister("SCRATCH")
        assert definition is not None
        assert definition.handler is expand_scratch
        assert registry.get("scratch") is None
        assert registry.unregister("scratch") is None


class TestCustomMacro:
    """Macros registered outside the package are expanded too."""

    def test_custom_macro_expands(self, tenant_macro, options):
        resolver = QueryTemplateResolver()
        result = resolver.resolve("T | where Tenant == $__tenant", options)
        assert result.raw_query == "T | where Tenant == 'contoso'"

    def test_custom_macro_listed(self, tenant_macro):
        assert get_registry().get("tenant").handler is tenant_macro

    def test_handler_returning_none_leaves_token(self, options):
        @register_macro(name="nothing", category=MacroCategory.FILTER)
        def expand_nothing(ctx, macro):
            return None

        try:
            result = QueryTemplateResolver().resolve("a $__nothing b", options)
            assert result.raw_query == "a $__nothing b"
        finally:
            get_registry().unregister("nothing")
