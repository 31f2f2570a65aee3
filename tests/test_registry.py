"""Strategies, argument binding and the rule registry."""
from __future__ import annotations

import types

import pytest

from dataverify.errors import (
    ArgumentBindingError,
    DuplicateRuleNameError,
    ErrorCode,
    InvalidStrategyError,
    RuleNotFoundError,
)
from dataverify.validation import (
    FunctionStrategy,
    StrategyRegistry,
    ValidationStrategy,
    bind_arguments,
    default_registry,
    describe_parameters,
)
from dataverify.validation.strategy import bound_parameters


class Palindrome(ValidationStrategy):
    name = "palindrome"
    description = "Validates that a string reads the same backwards"
    category = "Custom"

    def handler(self, value, ignore_case: bool = False) -> bool:
        text = value.lower() if ignore_case else value
        return text == text[::-1]


class Window(ValidationStrategy):
    name = "window"
    param_docs = {"low": ("Lower bound", 1)}

    def handler(self, value, low: int, high: int = 10, *extra) -> bool:
        return low <= value <= high


class TestDescribeParameters:
    def test_table_skips_the_value(self):
        descriptors = Window().parameters

        assert [d.name for d in descriptors] == ["low", "high", "extra"]
        low, high, extra = descriptors
        assert (low.position, low.required, low.annotation) == (0, True, "int")
        assert (low.description, low.example) == ("Lower bound", 1)
        assert (high.required, high.default) == (False, 10)
        assert extra.variadic and not extra.required

    def test_keyword_only_without_default_is_rejected(self):
        def handler(value, *, limit):
            return True

        with pytest.raises(InvalidStrategyError):
            describe_parameters(handler, owner="kw")

    def test_keyword_only_with_default_is_ignored(self):
        def handler(value, size=1, *, flag=False, **rest):
            return True

        assert [d.name for d in describe_parameters(handler)] == ["size"]

    def test_value_parameter_required(self):
        with pytest.raises(InvalidStrategyError):
            describe_parameters(lambda: True, owner="nothing")


class TestBindArguments:
    def test_defaults_fill_missing_optional(self):
        bound = bind_arguments(Window().parameters, 5, [2])
        assert bound == (5, 2, 10)

    def test_variadic_collects_the_rest(self):
        descriptors = Window().parameters
        bound = bind_arguments(descriptors, 5, [1, 9, "a", "b"])

        assert bound == (5, 1, 9, "a", "b")
        assert bound_parameters(descriptors, bound) == {"low": 1, "high": 9, "extra": ("a", "b")}

    def test_missing_required_argument(self):
        with pytest.raises(ArgumentBindingError) as exc_info:
            bind_arguments(Window().parameters, 5, [], rule="window")
        assert exc_info.value.code is ErrorCode.E2011_MISSING_ARGUMENT
        assert exc_info.value.parameter == "low"

    def test_too_many_arguments(self):
        with pytest.raises(ArgumentBindingError) as exc_info:
            bind_arguments(Palindrome().parameters, "aba", [True, "extra"], rule="palindrome")
        assert exc_info.value.code is ErrorCode.E2012_TOO_MANY_ARGUMENTS

    def test_none_is_a_real_argument(self):
        assert bind_arguments(Palindrome().parameters, "x", [None]) == ("x", None)


class TestStrategies:
    def test_execute_binds_and_runs(self):
        strategy = Palindrome()

        assert strategy.execute("Abba", [True]) is True
        assert strategy.execute("Abba") is False

    def test_metadata(self):
        metadata = Palindrome().metadata()

        assert metadata.name == "palindrome"
        assert metadata.category == "Custom"
        assert metadata.runs_on_empty is False
        assert metadata.parameters[0].name == "ignore_case"

    def test_function_strategy_uses_docstring(self):
        def positive(value, strict=True):
            """Validates that a number is positive.

            Zero is accepted unless strict.
            """
            return value > 0 if strict else value >= 0

        strategy = FunctionStrategy("positive", positive)

        assert strategy.description == "Validates that a number is positive."
        assert strategy.category == "Custom"
        assert [p.name for p in strategy.parameters] == ["strict"]
        assert strategy.execute(0, [False]) is True

    def test_function_strategy_requires_callable(self):
        with pytest.raises(InvalidStrategyError):
            FunctionStrategy("broken", "not callable")


class TestRegistration:
    def test_register_class_or_instance(self):
        registry = StrategyRegistry()
        registry.register(Palindrome)
        registry.register(Window())

        assert registry.names() == ["palindrome", "window"]
        assert isinstance(registry.get("palindrome"), Palindrome)

    def test_duplicate_name_is_rejected(self):
        registry = StrategyRegistry([Palindrome], allow_override=False)

        with pytest.raises(DuplicateRuleNameError) as exc_info:
            registry.register(Palindrome)
        assert exc_info.value.code is ErrorCode.E2002_DUPLICATE_RULE_NAME

    def test_replace_overrides(self):
        registry = StrategyRegistry([Palindrome], allow_override=False)
        replacement = FunctionStrategy("palindrome", lambda value: True)

        registry.register(replacement, replace=True)

        assert registry.get("palindrome") is replacement

    def test_override_from_settings(self, monkeypatch):
        from dataverify.config import get_settings

        monkeypatch.setenv("DATAVERIFY_ALLOW_RULE_OVERRIDE", "true")
        get_settings.cache_clear()
        registry = StrategyRegistry([Palindrome])

        registry.register(Palindrome)

        assert len(registry) == 1

    def test_abstract_and_nameless_strategies_are_rejected(self):
        class Nameless(ValidationStrategy):
            def handler(self, value) -> bool:
                return True

        registry = StrategyRegistry()
        with pytest.raises(InvalidStrategyError):
            registry.register(ValidationStrategy)
        with pytest.raises(InvalidStrategyError):
            registry.register(Nameless)
        with pytest.raises(InvalidStrategyError):
            registry.register(object())

    def test_register_from_module_in_definition_order(self):
        module = types.ModuleType("custom_rules")
        for cls in (Window, Palindrome):
            clone = type(cls.__name__, (cls,), {"__module__": "custom_rules"})
            setattr(module, cls.__name__, clone)
        module.Unrelated = Palindrome

        assert StrategyRegistry().register_from_module(module) == ["window", "palindrome"]

    def test_unregister_and_clear(self):
        registry = StrategyRegistry([Palindrome, Window])

        assert registry.unregister("window") is True
        assert registry.unregister("window") is False
        registry.clear()
        assert len(registry) == 0


class TestLookup:
    def test_unknown_name(self):
        registry = StrategyRegistry([Palindrome])

        with pytest.raises(RuleNotFoundError) as exc_info:
            registry.get("missing")
        assert exc_info.value.code is ErrorCode.E2001_RULE_NOT_FOUND
        assert exc_info.value.error.metadata["available"] == ["palindrome"]
        assert isinstance(exc_info.value, LookupError)

    def test_resolve_returns_result(self):
        registry = StrategyRegistry([Palindrome])

        assert registry.resolve("palindrome").unwrap().name == "palindrome"
        outcome = registry.resolve("missing")
        assert outcome.is_err()
        assert outcome.unwrap_err().code is ErrorCode.E2001_RULE_NOT_FOUND

    def test_child_sees_parent_and_may_shadow(self):
        parent = StrategyRegistry([Palindrome], allow_override=False)
        child = parent.child()
        shadow = FunctionStrategy("palindrome", lambda value: False)

        child.register(shadow)
        child.register(Window)

        assert child.get("palindrome") is shadow
        assert isinstance(parent.get("palindrome"), Palindrome)
        assert "window" not in parent
        assert child.names() == ["palindrome", "window"]

    def test_metadata_views(self):
        registry = StrategyRegistry([Palindrome, Window])

        assert registry.categories() == ["Custom", "General"]
        assert [m.name for m in registry.by_category("custom")] == ["palindrome"]
        assert [m.name for m in registry.all_metadata()] == ["palindrome", "window"]

    def test_contains_only_accepts_names(self):
        registry = StrategyRegistry([Palindrome])

        assert "palindrome" in registry
        assert 42 not in registry


class TestDefaultRegistry:
    def test_is_shared_and_holds_builtins(self):
        registry = default_registry()

        assert registry is default_registry()
        assert {"required", "email", "between", "file_mime"} <= set(registry.names())

    def test_sessions_register_on_children(self):
        from dataverify import DataVerify

        dv = DataVerify({})
        dv.register_function("session_only", lambda value: True)

        assert "session_only" not in default_registry()
        assert dv.registry.parent is default_registry()
