"""Validation Strategies

A strategy is a named, stateless unit of validation logic. Authors subclass
``ValidationStrategy``, declare their metadata as plain class data and
implement ``handler(self, value, ...)``:

    class MinLength(ValidationStrategy):
        name = "min_length"
        description = "Validates that a string has a minimum length"
        category = "String"
        examples = ('dv.field("password").min_length(8)',)
        param_docs = {"min": ("Minimum length required", 8)}

        def handler(self, value, min: int) -> bool:
            return len(value) >= min

The handler signature is read once per strategy class into a table of
``ParameterDescriptor`` records. Dispatch is then the pure function
``bind_arguments(descriptors, value, args)`` followed by a handler call.
"""
from __future__ import annotations

import inspect
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from dataverify.errors import ArgumentBindingError, ErrorCode, InvalidStrategyError


class ParameterDescriptor(BaseModel):
    """One bindable handler parameter (the value parameter is never described)."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    position: int
    required: bool
    default: Any = None
    variadic: bool = False
    annotation: str | None = None
    description: str = ""
    example: Any = None


class RuleMetadata(BaseModel):
    """Registration-time description of a strategy, consumed by documentation tooling."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    category: str = "General"
    examples: tuple[str, ...] = ()
    parameters: tuple[ParameterDescriptor, ...] = Field(default_factory=tuple)
    runs_on_empty: bool = False


# ============================================================================
# Descriptor table
# ============================================================================

def _annotation_name(annotation: Any) -> str | None:
    if annotation is inspect.Parameter.empty:
        return None
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", None) or repr(annotation)


def describe_parameters(handler: Callable, param_docs: dict[str, tuple[str, Any]] | None = None, *,
                        owner: str = "") -> tuple[ParameterDescriptor, ...]:
    """Build the descriptor table for ``handler``.

    ``handler`` must already be bound (or be a plain function) so that its
    first parameter is the value under validation.
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError) as e:
        raise InvalidStrategyError(f"Cannot inspect handler of '{owner}': {e}", strategy=owner) from e

    params = list(signature.parameters.values())
    if not params or params[0].kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
        raise InvalidStrategyError(f"Handler of '{owner}' must accept the value as its first positional parameter",
                                   strategy=owner)

    docs = param_docs or {}
    descriptors: list[ParameterDescriptor] = []
    for position, param in enumerate(params[1:]):
        if param.kind is inspect.Parameter.VAR_KEYWORD:
            continue
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                raise InvalidStrategyError(
                    f"Handler of '{owner}' has keyword-only parameter '{param.name}' without a default",
                    strategy=owner, parameter=param.name)
            continue
        description, example = docs.get(param.name, ("", None))
        variadic = param.kind is inspect.Parameter.VAR_POSITIONAL
        has_default = param.default is not inspect.Parameter.empty
        descriptors.append(ParameterDescriptor(
            name=param.name,
            position=position,
            required=not (has_default or variadic),
            default=param.default if has_default else None,
            variadic=variadic,
            annotation=_annotation_name(param.annotation),
            description=description,
            example=example,
        ))
    return tuple(descriptors)


def bind_arguments(descriptors: Sequence[ParameterDescriptor], value: Any, args: Sequence[Any],
                   *, rule: str = "") -> tuple:
    """Bind ``value`` and positional ``args`` into the handler's call arguments.

    The value always comes first; each argument fills the parameter at its
    position and omitted optional parameters take their declared default.
    """
    fixed = [d for d in descriptors if not d.variadic]
    variadic = len(fixed) != len(descriptors)

    if len(args) > len(fixed) and not variadic:
        raise ArgumentBindingError(
            rule, f"expected at most {len(fixed)} argument(s), got {len(args)}",
            code=ErrorCode.E2012_TOO_MANY_ARGUMENTS, given=len(args))

    bound: list[Any] = [value]
    for index, descriptor in enumerate(fixed):
        if index < len(args):
            bound.append(args[index])
        elif not descriptor.required:
            bound.append(descriptor.default)
        else:
            raise ArgumentBindingError(
                rule, f"missing required argument '{descriptor.name}'",
                code=ErrorCode.E2011_MISSING_ARGUMENT, parameter=descriptor.name, given=len(args))
    if variadic:
        bound.extend(args[len(fixed):])
    return tuple(bound)


def bound_parameters(descriptors: Sequence[ParameterDescriptor], bound: Sequence[Any]) -> dict[str, Any]:
    """Map parameter names to bound values (the inverse view used for messages)."""
    params: dict[str, Any] = {}
    for index, descriptor in enumerate(d for d in descriptors if not d.variadic):
        params[descriptor.name] = bound[index + 1]
    if any(d.variadic for d in descriptors):
        variadic = next(d for d in descriptors if d.variadic)
        params[variadic.name] = tuple(bound[len(params) + 1:])
    return params


# ============================================================================
# Strategies
# ============================================================================

_DESCRIPTOR_CACHE: dict[type, tuple[ParameterDescriptor, ...]] = {}
_CACHE_LOCK = threading.Lock()


class ValidationStrategy(ABC):
    """Base class for validation rules.

    Instances are shared by every session that uses the registry, so
    handlers must not keep per-call state on ``self``.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    category: ClassVar[str] = "General"
    examples: ClassVar[tuple[str, ...]] = ()
    param_docs: ClassVar[dict[str, tuple[str, Any]]] = {}
    # Only presence checks run on blank values; every other rule passes vacuously.
    runs_on_empty: ClassVar[bool] = False

    @abstractmethod
    def handler(self, value: Any, *args: Any) -> bool:
        """Return True when ``value`` satisfies the rule."""

    @property
    def parameters(self) -> tuple[ParameterDescriptor, ...]:
        cls = type(self)
        if (cached := _DESCRIPTOR_CACHE.get(cls)) is not None:
            return cached
        with _CACHE_LOCK:
            if cls not in _DESCRIPTOR_CACHE:
                _DESCRIPTOR_CACHE[cls] = describe_parameters(self.handler, self.param_docs, owner=self.name or cls.__name__)
            return _DESCRIPTOR_CACHE[cls]

    def bind(self, value: Any, args: Sequence[Any] = ()) -> tuple:
        return bind_arguments(self.parameters, value, args, rule=self.name)

    def execute(self, value: Any, args: Sequence[Any] = ()) -> bool:
        """Bind positional ``args`` and run the handler."""
        return bool(self.handler(*self.bind(value, args)))

    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            name=self.name,
            description=self.description,
            category=self.category,
            examples=tuple(self.examples),
            parameters=self.parameters,
            runs_on_empty=self.runs_on_empty,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionStrategy(ValidationStrategy):
    """Adapts a plain callable ``fn(value, ...) -> bool`` into a strategy."""

    def __init__(self, name: str, fn: Callable[..., Any], *, description: str = "", category: str = "Custom",
                 examples: Sequence[str] = (), param_docs: dict[str, tuple[str, Any]] | None = None,
                 runs_on_empty: bool = False):
        if not callable(fn):
            raise InvalidStrategyError(f"Strategy '{name}' must wrap a callable", strategy=name)
        self.name = name
        self.fn = fn
        self.description = description or (inspect.getdoc(fn) or "").split("\n")[0]
        self.category = category
        self.examples = tuple(examples)
        self.param_docs = dict(param_docs or {})
        self.runs_on_empty = runs_on_empty
        self._parameters = describe_parameters(fn, self.param_docs, owner=name)

    @property
    def parameters(self) -> tuple[ParameterDescriptor, ...]: return self._parameters

    def handler(self, value: Any, *args: Any) -> bool: return self.fn(value, *args)
