"""Evaluation Engine

Walks the field tree of a context and produces an ErrorCollection.

Walk order: fields in first-address order; for each field its rules, then
its conditionals, then each sub-field (rules, then conditionals). Every
rule runs at most once per run.

Failure policy:
- A handler returning False, or raising, records one ValidationError and
  the run continues.
- Unknown rule names and unbindable arguments are programmer errors and
  propagate (RuleNotFoundError, ArgumentBindingError), as does any
  DataVerifyError raised from inside a handler.
- Blank values satisfy every rule except presence checks
  (``runs_on_empty``), so optional fields only fail when present.
"""
from __future__ import annotations

from typing import Any, Protocol

from dataverify.config import get_settings
from dataverify.errors import DataVerifyError, ErrorCode, ReentrantEvaluationError, try_result
from dataverify.logging import bind_context, engine_logger, generate_correlation_id, unbind_context
from dataverify.modes import EvaluationState, ValidationMode

from .conditions import ConditionalEvaluator
from .context import Handler, ValidationContext
from .errors import ErrorAccumulator, ErrorCollection, ValidationError, create_accumulator
from .registry import StrategyRegistry
from .strategy import bound_parameters
from .traversal import DataTraverser, is_blank


class MessageRenderer(Protocol):
    def validation_message(self, test: str, field: str, value: Any, params: dict[str, Any] | None = None) -> str: ...


class ValidationOrchestrator:
    """Runs every attached rule of a context against one input object."""

    def __init__(self, context: ValidationContext, registry: StrategyRegistry, messages: MessageRenderer):
        self.context = context
        self.registry = registry
        self.messages = messages
        self._state = EvaluationState.NOT_STARTED
        self._last_errors: ErrorCollection | None = None

    @property
    def state(self) -> EvaluationState: return self._state

    @property
    def last_errors(self) -> ErrorCollection | None: return self._last_errors

    def verify(self, data: Any, mode: ValidationMode | str | None = None) -> ErrorCollection:
        """Evaluate the whole context against ``data``.

        Each call starts from an empty collection; the input is never mutated.
        """
        if self._state is EvaluationState.RUNNING:
            raise ReentrantEvaluationError()
        mode = ValidationMode(mode) if mode is not None else get_settings().VALIDATION_MODE
        # run_id reaches registry and translation events emitted during the run
        bind_context(run_id=generate_correlation_id())
        log = engine_logger().bind(mode=mode.value)
        log.debug("run_started", fields=len(self.context.fields))

        self._state = EvaluationState.RUNNING
        try:
            accumulator = create_accumulator(mode)
            traverser = DataTraverser(data)
            evaluator = ConditionalEvaluator(traverser)
            for field in self.context.fields:
                if not self._evaluate_target(field, traverser.get_value(field.name), evaluator, accumulator, log):
                    break
                if not all(
                    self._evaluate_target(sub, traverser.traverse_path(data, (field.name, *sub.path)),
                                          evaluator, accumulator, log)
                    for sub in field.sub_fields
                ):
                    break
            errors = accumulator.to_collection()
        except Exception as e:
            log.error("run_aborted", error=str(e), exception_type=type(e).__name__)
            raise
        else:
            log.debug("run_completed", errors=len(errors))
        finally:
            self._state = EvaluationState.COMPLETED
            unbind_context("run_id")

        self._last_errors = errors
        return errors

    def _evaluate_target(self, handler: Handler, value: Any, evaluator: ConditionalEvaluator,
                         accumulator: ErrorAccumulator, log) -> bool:
        for name, args in handler.rules.items():
            if not self._apply(handler, name, args, value, accumulator, log):
                return False
        for conditional in handler.conditionals:
            if not evaluator.should_run(conditional):
                continue
            if not self._apply(handler, conditional.rule_name, conditional.rule_args, value, accumulator, log):
                return False
        return True

    def _apply(self, handler: Handler, name: str, args: tuple, value: Any,
               accumulator: ErrorAccumulator, log) -> bool:
        """Run one rule; returns whether evaluation should continue."""
        strategy = self.registry.get(name)
        bound = strategy.bind(value, args)
        if not strategy.runs_on_empty and is_blank(value):
            return True

        outcome = try_result(lambda: bool(strategy.handler(*bound)), code=ErrorCode.E4010_RULE_EXECUTION_FAILED,
                             origin=name)
        if outcome.is_err():
            error = outcome.unwrap_err()
            if isinstance(error.cause, DataVerifyError):
                raise error.cause
            log.warning("rule_raised", rule=name, field=handler.key, error=error.message,
                        exception_type=error.metadata.get("exception_type"))
            passed = False
        else:
            passed = outcome.unwrap()
        if passed:
            return True
        return accumulator.add_error(self._build_error(handler, name, strategy.parameters, bound, value))

    def _build_error(self, handler: Handler, name: str, descriptors, bound: tuple, value: Any) -> ValidationError:
        message = handler.error_message or self.messages.validation_message(
            name, handler.display_name, value, bound_parameters(descriptors, bound))
        return ValidationError(field=handler.key, test=name, message=message, value=value, alias=handler.alias)
