"""DataVerify: declarative data validation.

Attach named rules to fields and nested sub-fields of an input object,
guard rules behind conditions on other fields, and collect every failure in
one pass.
"""
__version__ = "0.1.0"

from dataverify.errors import (  # noqa: E402
    ArgumentBindingError,
    ConditionalChainError,
    DataVerifyError,
    DuplicateRuleNameError,
    InvalidOperatorError,
    NoActiveTargetError,
    ReentrantEvaluationError,
    RuleNotFoundError,
)
from dataverify.modes import ValidationMode  # noqa: E402
from dataverify.validation import (  # noqa: E402
    DataVerify,
    ErrorCollection,
    FunctionStrategy,
    StrategyRegistry,
    ValidationError,
    ValidationStrategy,
    default_registry,
)

__all__ = [
    "__version__",
    "DataVerify",
    "ErrorCollection",
    "ValidationError",
    "ValidationMode",
    "ValidationStrategy",
    "FunctionStrategy",
    "StrategyRegistry",
    "default_registry",
    "DataVerifyError",
    "NoActiveTargetError",
    "RuleNotFoundError",
    "DuplicateRuleNameError",
    "ArgumentBindingError",
    "InvalidOperatorError",
    "ConditionalChainError",
    "ReentrantEvaluationError",
]
