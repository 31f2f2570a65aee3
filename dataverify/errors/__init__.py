"""Error Handling

Typed error records and the exception hierarchy for DataVerify.

Key components:
- AppError / ErrorCode / ErrorContext: structured error records
- Ok / Err / Result: value-level failure propagation inside the engine
- DataVerifyError and subclasses: programmer/configuration errors

Usage:
    from dataverify.errors import RuleNotFoundError, try_result

    outcome = try_result(lambda: handler(value), origin="email")
    if outcome.is_err():
        log.warning("rule_raised", error=outcome.unwrap_err().message)
"""
from .types import (
    AppError,
    Err,
    ErrorCode,
    ErrorContext,
    Ok,
    Result,
    from_exception,
    try_result,
)
from .exceptions import (
    ArgumentBindingError,
    ConditionalChainError,
    DataVerifyError,
    DuplicateRuleNameError,
    InvalidOperatorError,
    InvalidStrategyError,
    NoActiveTargetError,
    ReentrantEvaluationError,
    RuleNotFoundError,
    TranslationResourceError,
)

__all__ = [
    # Records
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Result
    "Ok",
    "Err",
    "Result",
    "from_exception",
    "try_result",
    # Exceptions
    "DataVerifyError",
    "NoActiveTargetError",
    "RuleNotFoundError",
    "DuplicateRuleNameError",
    "InvalidStrategyError",
    "ArgumentBindingError",
    "InvalidOperatorError",
    "ConditionalChainError",
    "ReentrantEvaluationError",
    "TranslationResourceError",
]
