"""Validation Error Collection

Failures of one evaluation run, in the order they were produced.

Error Format (``ErrorCollection.to_dicts()``):
[
    {
        "field": "address.city",
        "alias": "City",
        "test": "required",
        "message": "The field City is required",
        "value": null
    }
]

Accumulation follows the run mode: ``collect_all`` records every failure,
``fail_fast`` stops the run after the first one.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dataverify.modes import ValidationMode


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failing rule invocation.

    ``field`` is the field name, or ``parent.seg1.seg2`` for a sub-field;
    ``alias`` is the display name the caller configured, if any.
    """
    field: str
    test: str
    message: str
    value: Any = None
    alias: str | None = None

    @property
    def display_name(self) -> str: return self.alias or self.field

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "alias": self.alias, "test": self.test, "message": self.message, "value": self.value}

    def __str__(self) -> str: return f"{self.field}: {self.message}"


class ErrorCollection:
    """Append-only ordered failures with field-scoped lookup."""

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[ValidationError] = ()):
        self._errors: list[ValidationError] = list(errors)

    def add(self, error: ValidationError) -> None: self._errors.append(error)

    def first(self) -> ValidationError | None: return self._errors[0] if self._errors else None

    def last(self) -> ValidationError | None: return self._errors[-1] if self._errors else None

    def first_for(self, field: str) -> ValidationError | None:
        return next((e for e in self._errors if e.field == field), None)

    def for_field(self, field: str) -> list[ValidationError]: return [e for e in self._errors if e.field == field]

    def has_errors_for(self, field: str) -> bool: return any(e.field == field for e in self._errors)

    def fields(self) -> list[str]:
        """Failing fields in order of their first failure."""
        return list(dict.fromkeys(e.field for e in self._errors))

    def group_by_field(self) -> dict[str, list[ValidationError]]:
        result: dict[str, list[ValidationError]] = {}
        for error in self._errors: result.setdefault(error.field, []).append(error)
        return result

    @property
    def is_empty(self) -> bool: return not self._errors

    def to_dicts(self) -> list[dict[str, Any]]: return [e.to_dict() for e in self._errors]

    def __iter__(self) -> Iterator[ValidationError]: return iter(tuple(self._errors))

    def __len__(self) -> int: return len(self._errors)

    def __getitem__(self, index: int) -> ValidationError: return self._errors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCollection):
            return NotImplemented
        return self._errors == other._errors

    def __repr__(self) -> str: return f"ErrorCollection({len(self._errors)} error(s))"


# ============================================================================
# Accumulators
# ============================================================================

class ErrorAccumulator(ABC):
    """Abstract base for error accumulation strategies."""

    @abstractmethod
    def add_error(self, error: ValidationError) -> bool:
        """Add an error. Returns True if evaluation should continue, False if it should stop."""

    @abstractmethod
    def get_errors(self) -> list[ValidationError]:
        """Get accumulated errors."""

    @property
    @abstractmethod
    def mode(self) -> ValidationMode:
        """Get the accumulation mode."""

    def has_errors(self) -> bool: return bool(self.get_errors())

    def to_collection(self) -> ErrorCollection: return ErrorCollection(self.get_errors())


@dataclass
class FailFastAccumulator(ErrorAccumulator):
    """Fail-fast accumulator: stops on first error."""
    _error: ValidationError | None = None

    @property
    def mode(self) -> ValidationMode: return ValidationMode.FAIL_FAST

    def add_error(self, error: ValidationError) -> bool:
        if self._error is None: self._error = error
        return False

    def get_errors(self) -> list[ValidationError]: return [self._error] if self._error else []


@dataclass
class CollectAllAccumulator(ErrorAccumulator):
    """Collect-all accumulator: gathers every error."""
    _errors: list[ValidationError] = field(default_factory=list)

    @property
    def mode(self) -> ValidationMode: return ValidationMode.COLLECT_ALL

    def add_error(self, error: ValidationError) -> bool:
        self._errors.append(error)
        return True

    def get_errors(self) -> list[ValidationError]: return self._errors.copy()


def create_accumulator(mode: ValidationMode) -> ErrorAccumulator:
    """Factory for creating accumulators based on mode."""
    return FailFastAccumulator() if mode == ValidationMode.FAIL_FAST else CollectAllAccumulator()
