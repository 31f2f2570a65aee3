"""Conditional validation model and evaluator.

A conditional validation guards one rule behind one or more comparisons
against other fields of the input. Comparisons are resolved at evaluation
time against the whole input object, never against the guarded field.

Equality semantics (cross-kind comparisons are decided here, not inherited
from Python's loose ``==``):
- ``bool`` only equals ``bool`` (``True != 1``)
- numbers compare numerically across int/float/Decimal (``1 == 1.0``)
- strings never equal numbers (``"1" != 1``)
- anything else falls back to ``==``
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from dataverify.errors import InvalidOperatorError

from .traversal import DataTraverser


class ConditionalOperator(str, Enum):
    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"

    @classmethod
    def parse(cls, operator: str | ConditionalOperator) -> ConditionalOperator:
        """Resolve an operator symbol, raising InvalidOperatorError when unknown."""
        if isinstance(operator, cls):
            return operator
        try:
            return cls(operator)
        except ValueError:
            raise InvalidOperatorError(operator, [op.value for op in cls]) from None


class ConditionLogic(str, Enum):
    AND = "and"
    OR = "or"


@dataclass(frozen=True, slots=True)
class Condition:
    """One comparison: ``data[field] <operator> value``."""
    field: str
    operator: ConditionalOperator
    value: Any

    @classmethod
    def of(cls, field: str, operator: str | ConditionalOperator, value: Any) -> Condition:
        return cls(field=field, operator=ConditionalOperator.parse(operator), value=value)


@dataclass(frozen=True, slots=True)
class ConditionalValidation:
    """A rule that only runs when its conditions hold.

    Rule names are not checked here; an unknown name surfaces when the
    condition first holds during evaluation.
    """
    conditions: tuple[Condition, ...]
    rule_name: str
    rule_args: tuple = ()
    logic: ConditionLogic = ConditionLogic.AND

    def __post_init__(self):
        if not self.conditions:
            raise ValueError("ConditionalValidation requires at least one condition")

    @property
    def trigger_field(self) -> str:
        return self.conditions[0].field

    @property
    def operator(self) -> ConditionalOperator:
        return self.conditions[0].operator

    @property
    def expected_value(self) -> Any:
        return self.conditions[0].value


# ============================================================================
# Comparison primitives
# ============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def strict_equals(actual: Any, expected: Any) -> bool:
    """Type-aware equality used by ``=``, ``!=``, ``in``, ``not_in`` and ``contains``."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual is expected
    if _is_number(actual) and _is_number(expected):
        return actual == expected
    if _is_number(actual) or _is_number(expected):
        return False
    if isinstance(actual, str) != isinstance(expected, str):
        return False
    return actual == expected


def _strict_member(needle: Any, haystack: Sequence) -> bool:
    return any(strict_equals(needle, item) for item in haystack)


def _ordered(actual: Any, expected: Any, op: ConditionalOperator) -> bool:
    if not (_is_number(actual) and _is_number(expected)):
        return False
    match op:
        case ConditionalOperator.GREATER_THAN:
            return actual > expected
        case ConditionalOperator.GREATER_THAN_OR_EQUAL:
            return actual >= expected
        case ConditionalOperator.LESS_THAN:
            return actual < expected
        case _:
            return actual <= expected


def evaluate_condition(actual: Any, operator: str | ConditionalOperator, expected: Any) -> bool:
    """Apply one operator to an already-resolved actual value."""
    op = ConditionalOperator.parse(operator)
    match op:
        case ConditionalOperator.EQUALS:
            return strict_equals(actual, expected)
        case ConditionalOperator.NOT_EQUALS:
            return not strict_equals(actual, expected)
        case (ConditionalOperator.GREATER_THAN | ConditionalOperator.GREATER_THAN_OR_EQUAL
              | ConditionalOperator.LESS_THAN | ConditionalOperator.LESS_THAN_OR_EQUAL):
            return _ordered(actual, expected, op)
        case ConditionalOperator.IN:
            return isinstance(expected, (list, tuple)) and _strict_member(actual, expected)
        case ConditionalOperator.NOT_IN:
            return isinstance(expected, (list, tuple)) and not _strict_member(actual, expected)
        case ConditionalOperator.CONTAINS:
            if isinstance(actual, str):
                return isinstance(expected, str) and expected in actual
            if isinstance(actual, (list, tuple)):
                return _strict_member(expected, actual)
            return False
        case ConditionalOperator.STARTS_WITH:
            return isinstance(actual, str) and isinstance(expected, str) and actual.startswith(expected)
        case ConditionalOperator.ENDS_WITH:
            return isinstance(actual, str) and isinstance(expected, str) and actual.endswith(expected)


class ConditionalEvaluator:
    """Decides whether guarded rules run for one input object."""

    def __init__(self, traverser: DataTraverser):
        self.traverser = traverser

    def condition_holds(self, condition: Condition) -> bool:
        actual = self.traverser.get_field_value(condition.field)
        return evaluate_condition(actual, condition.operator, condition.value)

    def should_run(self, conditional: ConditionalValidation) -> bool:
        results = (self.condition_holds(c) for c in conditional.conditions)
        if conditional.logic is ConditionLogic.OR:
            return any(results)
        return all(results)
