"""DataVerify: the fluent builder over context, registry, engine and messages.

Usage:
    dv = DataVerify({"email": "someone@example.com", "country": "FR"})
    dv.field("email").required().email().min_length(5)
    dv.field("vat").when("country", "in", ["FR", "DE"]).then.required()
    dv.field("address").dict().subfield("city").required().string()

    if not dv.verify():
        for error in dv.errors:
            print(error.field, error.message)

Every rule call acts on the most recently addressed field or sub-field.
``when(...)`` starts a condition chain; ``then`` guards exactly the next
rule call and hands the builder back, so later rules are unconditional.
A chain left without its guarded rule raises at the next ``when()`` or at
``verify()``.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any

from dataverify.errors import ConditionalChainError, ErrorCode, NoActiveTargetError
from dataverify.modes import ValidationMode
from dataverify.translation import TranslationManager, Translator

from .conditions import Condition, ConditionLogic
from .context import Handler, ValidationContext
from .engine import ValidationOrchestrator
from .errors import ErrorCollection
from .registry import StrategyLike, StrategyRegistry, default_registry
from .strategy import RuleMetadata


class DataVerify:
    """Declarative validation session for one input object."""

    def __init__(self, data: Any, *, registry: StrategyRegistry | None = None, translator: Translator | None = None,
                 locale: str | None = None):
        self.data = data
        # Session-local rules go into a child so they never leak into the shared registry
        self._registry = (registry if registry is not None else default_registry()).child()
        self._context = ValidationContext()
        self._messages = TranslationManager(translator, locale)
        self._orchestrator = ValidationOrchestrator(self._context, self._registry, self._messages)
        self._errors = ErrorCollection()
        self._verified = False
        self._pending: ConditionalBuilder | None = None

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def field(self, name: str) -> DataVerify:
        self._context.address_field(name)
        return self

    def subfield(self, *path: str) -> DataVerify:
        self._context.address_sub_field(*path)
        return self

    @property
    def context(self) -> ValidationContext: return self._context

    @property
    def registry(self) -> StrategyRegistry: return self._registry

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def rule(self, name: str, *args: Any) -> DataVerify:
        """Attach rule ``name``; unknown names surface when ``verify()`` runs."""
        self._context.add_rule(name, args)
        return self

    def __getattr__(self, name: str) -> Callable[..., DataVerify]:
        registry = self.__dict__.get("_registry")
        if name.startswith("_") or registry is None or name not in registry:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute or validation rule '{name}'")
        return partial(self.rule, name)

    def alias(self, name: str) -> DataVerify:
        self._context.set_alias(name)
        return self

    def error_message(self, message: str) -> DataVerify:
        self._context.set_error_message(message)
        return self

    def when(self, field: str, operator: str, value: Any) -> ConditionalBuilder:
        if (target := self._context.current()) is None:
            raise NoActiveTargetError("when")
        self._ensure_chain_closed()
        self._pending = ConditionalBuilder(self, target, Condition.of(field, operator, value))
        return self._pending

    def _ensure_chain_closed(self) -> None:
        if self._pending is not None:
            raise ConditionalChainError(
                "Incomplete conditional validation: finish the previous when() with 'then' and a rule")

    def _close_chain(self) -> None: self._pending = None

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def verify(self, mode: ValidationMode | str | None = None) -> bool:
        """Run every attached rule; True when nothing failed."""
        self._ensure_chain_closed()
        self._errors = self._orchestrator.verify(self.data, mode)
        self._verified = True
        return self._errors.is_empty

    @property
    def errors(self) -> ErrorCollection: return self._errors

    def get_errors(self, as_objects: bool = False) -> list:
        return list(self._errors) if as_objects else self._errors.to_dicts()

    @property
    def is_verified(self) -> bool: return self._verified

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def register_strategy(self, strategy: StrategyLike, *, replace: bool | None = None) -> DataVerify:
        self._registry.register(strategy, replace=replace)
        return self

    def register_function(self, name: str, fn: Callable[..., Any], **options: Any) -> DataVerify:
        self._registry.register_function(name, fn, **options)
        return self

    def set_translator(self, translator: Translator | None) -> DataVerify:
        self._messages.set_translator(translator)
        return self

    def set_locale(self, locale: str) -> DataVerify:
        self._messages.set_locale(locale)
        return self

    def add_translations(self, messages: Mapping[str, Any], locale: str = "en") -> DataVerify:
        self._messages.add_translations(messages, locale)
        return self

    # ------------------------------------------------------------------
    # Rule discovery and documentation
    # ------------------------------------------------------------------

    def list_validations(self, category: str | None = None) -> list[str]:
        if category is None:
            return self._registry.names()
        return [m.name for m in self._registry.by_category(category)]

    def get_validation_metadata(self, name: str) -> RuleMetadata | None:
        return self._registry.metadata(name) if name in self._registry else None

    def get_validation_categories(self) -> list[str]: return self._registry.categories()

    def generate_documentation(self, fmt: str = "markdown", **options: Any) -> str:
        from dataverify.docs import get_generator

        return get_generator(fmt, **options).generate(self._registry)

    def generate_json_schema(self) -> str: return self.generate_documentation("jsonschema")

    def generate_openapi_schema(self, **options: Any) -> str: return self.generate_documentation("openapi", **options)


class ConditionalBuilder:
    """Collects the conditions of one ``when(...)`` chain."""

    def __init__(self, verifier: DataVerify, target: Handler, first: Condition):
        self._verifier = verifier
        self._target = target
        self._conditions: list[Condition] = [first]
        self._logic: ConditionLogic | None = None

    def _extend(self, logic: ConditionLogic, field: str, operator: str, value: Any) -> ConditionalBuilder:
        if self._logic is not None and self._logic is not logic:
            raise ConditionalChainError("Cannot mix and_() and or_() in one conditional chain",
                                        code=ErrorCode.E3003_MIXED_LOGIC)
        self._logic = logic
        self._conditions.append(Condition.of(field, operator, value))
        return self

    def and_(self, field: str, operator: str, value: Any) -> ConditionalBuilder:
        return self._extend(ConditionLogic.AND, field, operator, value)

    def or_(self, field: str, operator: str, value: Any) -> ConditionalBuilder:
        return self._extend(ConditionLogic.OR, field, operator, value)

    @property
    def conditions(self) -> tuple[Condition, ...]: return tuple(self._conditions)

    @property
    def logic(self) -> ConditionLogic: return self._logic or ConditionLogic.AND

    @property
    def then(self) -> GuardedRule:
        return GuardedRule(self._verifier, self._target, self.conditions, self.logic)

    def __getattr__(self, name: str) -> Any:
        verifier = self.__dict__.get("_verifier")
        if not name.startswith("_") and verifier is not None and name in verifier.registry:
            raise ConditionalChainError(f"Incomplete conditional validation: use 'then' before '{name}'")
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")


class GuardedRule:
    """Attaches the next rule call behind the collected conditions."""

    def __init__(self, verifier: DataVerify, target: Handler, conditions: Sequence[Condition], logic: ConditionLogic):
        self._verifier = verifier
        self._target = target
        self._conditions = tuple(conditions)
        self._logic = logic

    def rule(self, name: str, *args: Any) -> DataVerify:
        self._target.add_conditional_rule(name, args, self._conditions, self._logic)
        self._verifier._close_chain()
        return self._verifier

    def __getattr__(self, name: str) -> Callable[..., DataVerify]:
        verifier = self.__dict__.get("_verifier")
        if name.startswith("_") or verifier is None or name not in verifier.registry:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute or validation rule '{name}'")
        return partial(self.rule, name)
