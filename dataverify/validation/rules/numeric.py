"""Numeric rules.

Numbers and numeric strings compare numerically; ``between`` also orders
dates and datetimes when all three operands are of the same kind.
"""
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from ..strategy import ValidationStrategy

_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def to_number(value: Any) -> Decimal | None:
    """Numeric view of ``value``; ``None`` for booleans and non-numeric values."""
    if isinstance(value, bool): return None
    if isinstance(value, (int, Decimal)): return Decimal(value)
    if isinstance(value, float): return Decimal(repr(value))
    if isinstance(value, str) and _NUMERIC.match(value):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


class Between(ValidationStrategy):
    name = "between"
    description = "Validates that a number (or date) lies between two bounds, inclusive"
    category = "Numeric"
    examples = ('dv.field("age").between(18, 65)', 'dv.field("birthdate").between(date(1920, 1, 1), date(2020, 1, 1))')
    param_docs = {"min": ("Minimum value (inclusive)", 18), "max": ("Maximum value (inclusive)", 65)}

    def handler(self, value: Any, min: Any, max: Any) -> bool:
        if all(isinstance(v, date) for v in (value, min, max)):
            # datetime is a date subclass; never compare a date against a datetime
            if len({type(v) is date for v in (value, min, max)}) != 1: return False
            return min <= value <= max
        number, low, high = to_number(value), to_number(min), to_number(max)
        if number is None or low is None or high is None: return False
        return low <= number <= high


class GreaterThan(ValidationStrategy):
    name = "greater_than"
    description = "Validates that a number is strictly greater than a minimum"
    category = "Numeric"
    examples = ('dv.field("age").greater_than(18)',)
    param_docs = {"min": ("Exclusive lower bound", 18)}

    def handler(self, value: Any, min: Any) -> bool:
        number, bound = to_number(value), to_number(min)
        return number is not None and bound is not None and number > bound


class LowerThan(ValidationStrategy):
    name = "lower_than"
    description = "Validates that a number is strictly lower than a maximum"
    category = "Numeric"
    examples = ('dv.field("score").lower_than(100)',)
    param_docs = {"max": ("Exclusive upper bound", 100)}

    def handler(self, value: Any, max: Any) -> bool:
        number, bound = to_number(value), to_number(max)
        return number is not None and bound is not None and number < bound
