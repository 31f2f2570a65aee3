"""Validation context, field handlers and value traversal."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from dataverify.errors import ErrorCode, NoActiveTargetError
from dataverify.validation import (
    Condition,
    DataTraverser,
    FieldHandler,
    SubFieldHandler,
    ValidationContext,
    is_blank,
)


class TestAddressing:
    def test_address_field_creates_or_returns(self):
        context = ValidationContext()
        first = context.address_field("email")
        again = context.address_field("email")

        assert first is again
        assert context.fields.names() == ["email"]
        assert context.stack == (first, first)

    def test_sub_field_belongs_to_current_field(self):
        context = ValidationContext()
        user = context.address_field("user")
        city = context.address_sub_field("address", "city")

        assert isinstance(city, SubFieldHandler)
        assert city.path == ("address", "city")
        assert city.key == "user.address.city"
        assert user.get_sub_field(["address", "city"]) is city
        assert context.current() is city
        assert context.current_field() is user

    def test_current_field_skips_sub_fields(self):
        context = ValidationContext()
        context.address_field("a")
        b = context.address_field("b")
        context.address_sub_field("x")
        context.address_sub_field("y")

        assert context.current_field() is b

    def test_sub_field_without_field_raises(self):
        with pytest.raises(NoActiveTargetError) as exc_info:
            ValidationContext().address_sub_field("city")
        assert exc_info.value.code is ErrorCode.E1001_NO_ACTIVE_TARGET

    def test_empty_sub_field_path_raises(self):
        context = ValidationContext()
        context.address_field("user")

        with pytest.raises(ValueError):
            context.address_sub_field()

    def test_reset_forgets_everything(self):
        context = ValidationContext()
        context.address_field("a")
        context.reset()

        assert context.current() is None
        assert len(context.fields) == 0


class TestChainOperations:
    @pytest.mark.parametrize("call", [
        lambda c: c.add_rule("required"),
        lambda c: c.add_conditional_rule("required", (), [Condition.of("a", "=", 1)]),
        lambda c: c.set_alias("Name"),
        lambda c: c.set_error_message("Bad"),
    ])
    def test_require_an_active_target(self, call):
        with pytest.raises(NoActiveTargetError):
            call(ValidationContext())

    def test_operations_apply_to_top_of_stack(self):
        context = ValidationContext()
        field = context.address_field("user")
        context.add_rule("dict")
        sub = context.address_sub_field("name")
        context.add_rule("required")
        context.set_alias("Name")

        assert field.rules == {"dict": ()}
        assert sub.rules == {"required": ()}
        assert sub.alias == "Name"
        assert field.alias is None

    def test_message_names_the_operation(self):
        with pytest.raises(NoActiveTargetError, match="'alias'"):
            ValidationContext().set_alias("x")


class TestHandlers:
    def test_rules_keep_first_insertion_order(self):
        handler = FieldHandler("f")
        handler.add_rule("required")
        handler.add_rule("min_length", (3,))
        handler.add_rule("required", ("again",))

        assert list(handler.rules) == ["required", "min_length"]
        assert handler.rules["required"] == ("again",)

    def test_remove_rule(self):
        handler = FieldHandler("f")
        handler.add_rule("required")

        assert handler.remove_rule("required") is True
        assert handler.remove_rule("required") is False
        assert handler.rules == {}

    def test_conditionals_are_a_list(self):
        handler = FieldHandler("f")
        handler.add_conditional_rule("required", (), [Condition.of("a", "=", 1)])
        handler.add_conditional_rule("required", (), [Condition.of("b", "=", 2)])

        assert [c.trigger_field for c in handler.conditionals] == ["a", "b"]

    def test_sub_field_identity_is_full_path(self):
        handler = FieldHandler("root")
        ab = handler.add_sub_field(("a", "b"))
        ac = handler.add_sub_field(("a", "c"))
        ab.add_rule("required")

        assert ab is not ac
        assert ac.rules == {}
        assert handler.add_sub_field(["a", "b"]) is ab
        assert ("a", "b") in handler.sub_fields
        assert handler.sub_fields.paths() == [("a", "b"), ("a", "c")]

    def test_display_name_prefers_alias(self):
        handler = FieldHandler("email")
        assert handler.display_name == "email"
        handler.set_alias("Email Address")
        assert handler.display_name == "Email Address"


class TestTraversal:
    def test_top_level_lookup(self):
        traverser = DataTraverser({"a": 1})
        assert traverser.get_value("a") == 1
        assert traverser.get_value("missing") is None

    def test_paths_through_mixed_structures(self):
        data = {"users": [SimpleNamespace(name="Ann")], "meta": {"tags": ("x", "y")}}

        assert DataTraverser.traverse_path(data, ["users", "0", "name"]) == "Ann"
        assert DataTraverser.traverse_path(data, ["meta", "tags", "1"]) == "y"
        assert DataTraverser.traverse_path(data, ["users", "5", "name"]) is None
        assert DataTraverser.traverse_path(data, ["meta", "tags", "-1"]) is None
        assert DataTraverser.traverse_path(data, ["meta", "tags", "x"]) is None
        assert DataTraverser.traverse_path("text", ["0"]) is None

    def test_dotted_field_values(self):
        traverser = DataTraverser({"config": {"enabled": False}})
        assert traverser.get_field_value("config.enabled") is False
        assert traverser.get_field_value("config.missing.deep") is None

    @pytest.mark.parametrize("value, blank", [
        (None, True), ("", True), ([], True), ({}, True), (set(), True), (SimpleNamespace(), True),
        (False, False), (0, False), (0.0, False), ("0", False), (" ", False), (SimpleNamespace(a=None), False),
    ])
    def test_is_blank(self, value, blank):
        assert is_blank(value) is blank
