"""Structured Error Types

Typed error codes, immutable error records and a small Result monad used to
carry failures across the engine without raising. Only programmer errors
escape as exceptions (see ``exceptions.py``); everything that concerns the
validity of user data travels as values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union, final

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E1xxx: Builder / structural errors
    E2xxx: Rule registry and dispatch errors
    E3xxx: Conditional validation errors
    E4xxx: Evaluation errors
    E5xxx: Translation errors
    E9xxx: Internal/Unknown errors
    """
    # Builder / structural (E1xxx)
    E1001_NO_ACTIVE_TARGET = 1001

    # Registry / dispatch (E2xxx)
    E2001_RULE_NOT_FOUND = 2001
    E2002_DUPLICATE_RULE_NAME = 2002
    E2003_INVALID_STRATEGY = 2003
    E2010_ARGUMENT_BINDING = 2010
    E2011_MISSING_ARGUMENT = 2011
    E2012_TOO_MANY_ARGUMENTS = 2012

    # Conditional (E3xxx)
    E3001_INVALID_OPERATOR = 3001
    E3002_INCOMPLETE_CHAIN = 3002
    E3003_MIXED_LOGIC = 3003

    # Evaluation (E4xxx)
    E4001_REENTRANT_EVALUATION = 4001
    E4010_RULE_EXECUTION_FAILED = 4010

    # Translation (E5xxx)
    E5001_INVALID_RESOURCE = 5001
    E5002_NO_LOADER = 5002

    # Internal (E9xxx)
    E9001_UNEXPECTED_ERROR = 9001


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where an error was raised."""
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Base error record.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata for debugging
    - Optional cause exception
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. Wraps an AppError."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata: Any,
) -> Err[AppError]:
    """Convert exception to Err with full context."""
    return Err(AppError(
        code=code,
        message=message or str(exc) or type(exc).__name__,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))


def try_result(
    f: Callable[[], T],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Execute function and wrap its outcome in a Result.

    Catches exceptions and converts them to Err.
    """
    try:
        return Ok(f())
    except Exception as e:
        return from_exception(e, code=code, origin=origin, exception_type=type(e).__name__)
