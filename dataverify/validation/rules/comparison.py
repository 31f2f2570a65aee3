"""Membership rules. Membership uses the same type-aware equality as conditionals."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..conditions import strict_equals
from ..strategy import ValidationStrategy


def _member(value: Any, options: Sequence[Any]) -> bool: return any(strict_equals(value, o) for o in options)


class IsIn(ValidationStrategy):
    name = "is_in"
    description = "Validates that a value is one of the allowed values"
    category = "Comparison"
    examples = ('dv.field("status").is_in(["draft", "published"])',)
    param_docs = {"allowed": ("Allowed values", ["draft", "published"])}

    def handler(self, value: Any, allowed: Sequence[Any]) -> bool: return _member(value, allowed)


class NotIn(ValidationStrategy):
    name = "not_in"
    description = "Validates that a value is not one of the forbidden values"
    category = "Comparison"
    examples = ('dv.field("username").not_in(["admin", "root"])',)
    param_docs = {"forbidden": ("Forbidden values", ["admin", "root"])}

    def handler(self, value: Any, forbidden: Sequence[Any]) -> bool: return not _member(value, forbidden)
