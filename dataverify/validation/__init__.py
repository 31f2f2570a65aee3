"""Validation core.

Key components:
- DataVerify: fluent builder and entry point
- ValidationContext / FieldHandler / SubFieldHandler: the field tree
- ConditionalEvaluator: guards rules behind conditions on other fields
- ValidationStrategy / StrategyRegistry: named rules and their dispatch
- ValidationOrchestrator: runs a context against an input object
- ErrorCollection / ValidationError: the ordered failures of a run
"""
from .conditions import (
    Condition,
    ConditionalEvaluator,
    ConditionalOperator,
    ConditionalValidation,
    ConditionLogic,
    evaluate_condition,
    strict_equals,
)
from .context import ValidationContext
from .engine import ValidationOrchestrator
from .errors import (
    CollectAllAccumulator,
    ErrorAccumulator,
    ErrorCollection,
    FailFastAccumulator,
    ValidationError,
    create_accumulator,
)
from .handlers import FieldCollection, FieldHandler, SubFieldCollection, SubFieldHandler
from .registry import StrategyRegistry, default_registry
from .strategy import (
    FunctionStrategy,
    ParameterDescriptor,
    RuleMetadata,
    ValidationStrategy,
    bind_arguments,
    describe_parameters,
)
from .traversal import DataTraverser, is_blank
from .verifier import ConditionalBuilder, DataVerify, GuardedRule

__all__ = [
    # Entry point
    "DataVerify",
    "ConditionalBuilder",
    "GuardedRule",
    # Field tree
    "ValidationContext",
    "FieldHandler",
    "FieldCollection",
    "SubFieldHandler",
    "SubFieldCollection",
    # Conditionals
    "Condition",
    "ConditionLogic",
    "ConditionalOperator",
    "ConditionalValidation",
    "ConditionalEvaluator",
    "evaluate_condition",
    "strict_equals",
    # Strategies
    "ValidationStrategy",
    "FunctionStrategy",
    "ParameterDescriptor",
    "RuleMetadata",
    "bind_arguments",
    "describe_parameters",
    "StrategyRegistry",
    "default_registry",
    # Engine
    "ValidationOrchestrator",
    "DataTraverser",
    "is_blank",
    # Errors
    "ValidationError",
    "ErrorCollection",
    "ErrorAccumulator",
    "FailFastAccumulator",
    "CollectAllAccumulator",
    "create_accumulator",
]
