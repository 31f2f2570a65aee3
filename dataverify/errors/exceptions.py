"""Exceptions for programmer and configuration errors.

Each exception wraps an AppError so callers get a typed code, structured
metadata and a correlation id alongside the usual exception message. User
data never raises: invalid input is reported through the ErrorCollection.
"""
from __future__ import annotations

from typing import Any, Iterable

from .types import AppError, ErrorCode, ErrorContext


class DataVerifyError(Exception):
    """Exception wrapper for AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @staticmethod
    def _build(code: ErrorCode, message: str, *, origin: str = "", **metadata: Any) -> AppError:
        return AppError(
            code=code,
            message=message,
            context=ErrorContext(origin=origin),
            metadata={k: v for k, v in metadata.items() if v is not None},
        )


class NoActiveTargetError(DataVerifyError):
    """A chain operation was called before any field was addressed."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(self._build(
            ErrorCode.E1001_NO_ACTIVE_TARGET,
            f"Cannot call '{operation}' without an active field or subfield. Call field() first.",
            origin="context",
            operation=operation,
        ))


class RuleNotFoundError(DataVerifyError, LookupError):
    """A rule name does not resolve to any registered strategy."""

    def __init__(self, rule: str, available: Iterable[str] = ()):
        self.rule = rule
        names = sorted(available)
        super().__init__(self._build(
            ErrorCode.E2001_RULE_NOT_FOUND,
            f"Validation rule '{rule}' not found.",
            origin="registry",
            rule=rule,
            available=names or None,
        ))


class DuplicateRuleNameError(DataVerifyError):
    """Two strategies were registered under the same name."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(self._build(
            ErrorCode.E2002_DUPLICATE_RULE_NAME,
            f"Validation rule '{rule}' is already registered. Pass replace=True to override it.",
            origin="registry",
            rule=rule,
        ))


class InvalidStrategyError(DataVerifyError, TypeError):
    """An object offered to the registry is not a usable strategy."""

    def __init__(self, message: str, **metadata: Any):
        super().__init__(self._build(ErrorCode.E2003_INVALID_STRATEGY, message, origin="registry", **metadata))


class ArgumentBindingError(DataVerifyError, TypeError):
    """Positional rule arguments could not be bound to the handler's parameters."""

    def __init__(self, rule: str, message: str, *, code: ErrorCode = ErrorCode.E2010_ARGUMENT_BINDING,
                 parameter: str | None = None, given: int | None = None):
        self.rule = rule
        self.parameter = parameter
        super().__init__(self._build(
            code,
            f"Rule '{rule}': {message}",
            origin="dispatch",
            rule=rule,
            parameter=parameter,
            given=given,
        ))


class InvalidOperatorError(DataVerifyError, ValueError):
    """A conditional used an operator outside the closed operator set."""

    def __init__(self, operator: Any, allowed: Iterable[str]):
        self.operator = operator
        allowed_list = ", ".join(allowed)
        super().__init__(self._build(
            ErrorCode.E3001_INVALID_OPERATOR,
            f"Invalid operator '{operator}'. Allowed operators: {allowed_list}",
            origin="conditional",
            operator=str(operator),
        ))


class ConditionalChainError(DataVerifyError):
    """A when/and/or/then chain was built in an invalid order."""

    def __init__(self, message: str, *, code: ErrorCode = ErrorCode.E3002_INCOMPLETE_CHAIN):
        super().__init__(self._build(code, message, origin="conditional"))


class ReentrantEvaluationError(DataVerifyError, RuntimeError):
    """verify() was called while a run on the same orchestrator was active."""

    def __init__(self) -> None:
        super().__init__(self._build(
            ErrorCode.E4001_REENTRANT_EVALUATION,
            "A validation run is already in progress on this instance.",
            origin="engine",
        ))


class TranslationResourceError(DataVerifyError, ValueError):
    """A translation resource was rejected by its loader."""

    def __init__(self, message: str, *, code: ErrorCode = ErrorCode.E5001_INVALID_RESOURCE):
        super().__init__(self._build(code, message, origin="translation"))
