"""Strategy registry - maps rule names to shared strategy instances."""
from __future__ import annotations

import inspect
import threading
from collections.abc import Callable, Iterable
from functools import lru_cache
from types import ModuleType
from typing import Any

from dataverify.config import get_settings
from dataverify.errors import (
    AppError,
    DuplicateRuleNameError,
    Err,
    ErrorCode,
    ErrorContext,
    InvalidStrategyError,
    Ok,
    Result,
    RuleNotFoundError,
)
from dataverify.logging import registry_logger

from .strategy import FunctionStrategy, RuleMetadata, ValidationStrategy

StrategyLike = ValidationStrategy | type[ValidationStrategy]


class StrategyRegistry:
    """Name -> strategy table with optional parent fall-through.

    A child registry sees every rule of its parent and may shadow them;
    registrations never propagate upwards.
    """

    def __init__(self, strategies: Iterable[StrategyLike] = (), *, parent: StrategyRegistry | None = None,
                 allow_override: bool | None = None):
        self._strategies: dict[str, ValidationStrategy] = {}
        self._lock = threading.RLock()
        self.parent = parent
        self._allow_override = allow_override
        self.register_many(strategies)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @staticmethod
    def _instantiate(strategy: StrategyLike) -> ValidationStrategy:
        if isinstance(strategy, type) and issubclass(strategy, ValidationStrategy):
            if inspect.isabstract(strategy):
                raise InvalidStrategyError(f"Strategy class '{strategy.__name__}' is abstract",
                                           strategy=strategy.__name__)
            strategy = strategy()
        if not isinstance(strategy, ValidationStrategy):
            raise InvalidStrategyError(f"Expected a ValidationStrategy, got {type(strategy).__name__}")
        if not isinstance(strategy.name, str) or not strategy.name:
            raise InvalidStrategyError(f"Strategy '{type(strategy).__name__}' must declare a non-empty name",
                                       strategy=type(strategy).__name__)
        return strategy

    def _overrides_allowed(self, replace: bool | None) -> bool:
        if replace is not None:
            return replace
        if self._allow_override is not None:
            return self._allow_override
        return get_settings().ALLOW_RULE_OVERRIDE

    def register(self, strategy: StrategyLike, *, replace: bool | None = None) -> ValidationStrategy:
        """Register a strategy instance or class (classes are instantiated once)."""
        instance = self._instantiate(strategy)
        # Building the descriptor table here surfaces unusable signatures at registration
        _ = instance.parameters
        log = registry_logger()
        with self._lock:
            if instance.name in self._strategies and not self._overrides_allowed(replace):
                log.warning("duplicate_rule_rejected", rule=instance.name)
                raise DuplicateRuleNameError(instance.name)
            self._strategies[instance.name] = instance
        log.debug("rule_registered", rule=instance.name, category=instance.category)
        return instance

    def register_many(self, strategies: Iterable[StrategyLike], *, replace: bool | None = None) -> list[str]:
        return [self.register(s, replace=replace).name for s in strategies]

    def register_function(self, name: str, fn: Callable[..., Any], *, replace: bool | None = None,
                          **options: Any) -> ValidationStrategy:
        """Register a plain callable ``fn(value, ...) -> bool`` under ``name``."""
        return self.register(FunctionStrategy(name, fn, **options), replace=replace)

    def register_from_module(self, module: ModuleType, *, replace: bool | None = None) -> list[str]:
        """Register every concrete strategy class defined in ``module``, in definition order."""
        classes = [
            obj for obj in vars(module).values()
            if isinstance(obj, type) and issubclass(obj, ValidationStrategy)
            and obj.__module__ == module.__name__ and not inspect.isabstract(obj) and obj.name
        ]
        return self.register_many(classes, replace=replace)

    def unregister(self, name: str) -> bool:
        """Remove a local registration; parent registrations are untouched."""
        with self._lock:
            return self._strategies.pop(name, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._strategies.clear()

    def child(self) -> StrategyRegistry:
        return StrategyRegistry(parent=self, allow_override=self._allow_override)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find(self, name: str) -> ValidationStrategy | None:
        registry: StrategyRegistry | None = self
        while registry is not None:
            if (strategy := registry._strategies.get(name)) is not None:
                return strategy
            registry = registry.parent
        return None

    def get(self, name: str) -> ValidationStrategy:
        if (strategy := self._find(name)) is None:
            raise RuleNotFoundError(name, self.names())
        return strategy

    def resolve(self, name: str) -> Result[ValidationStrategy, AppError]:
        if (strategy := self._find(name)) is not None:
            return Ok(strategy)
        return Err(AppError(
            code=ErrorCode.E2001_RULE_NOT_FOUND,
            message=f"Validation rule '{name}' not found.",
            context=ErrorContext(origin="registry"),
            metadata={"rule": name},
        ))

    def has(self, name: str) -> bool: return self._find(name) is not None

    def __contains__(self, name: object) -> bool: return isinstance(name, str) and self.has(name)

    def names(self) -> list[str]:
        names = set(self._strategies)
        if self.parent is not None:
            names.update(self.parent.names())
        return sorted(names)

    def __len__(self) -> int: return len(self.names())

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def metadata(self, name: str) -> RuleMetadata: return self.get(name).metadata()

    def all_metadata(self) -> list[RuleMetadata]: return [self.metadata(n) for n in self.names()]

    def categories(self) -> list[str]: return sorted({m.category for m in self.all_metadata()})

    def by_category(self, category: str) -> list[RuleMetadata]:
        return [m for m in self.all_metadata() if m.category.lower() == category.lower()]


_DEFAULT_LOCK = threading.Lock()


@lru_cache(maxsize=1)
def _build_default_registry() -> StrategyRegistry:
    from .rules import BUILTIN_RULES

    return StrategyRegistry(BUILTIN_RULES, allow_override=False)


def default_registry() -> StrategyRegistry:
    """Process-wide registry holding the built-in rules.

    Treat it as read-only; register custom rules on a ``child()``.
    """
    with _DEFAULT_LOCK:
        return _build_default_registry()
