"""Field and Sub-Field Handlers

Per-target records built up by rule chains and consumed by the engine.

- Rules form a mapping keyed by rule name: attaching the same name twice
  replaces its arguments but keeps the position of the first insertion.
- Conditionals are an ordered list; the same rule may be guarded several
  times behind different conditions.
- Sub-fields are identified by their full path tuple, so ``("a", "b")`` and
  ``("a", "c")`` are always distinct handlers.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from .conditions import Condition, ConditionalValidation, ConditionLogic


class _RuleTarget:
    """State and chain operations shared by fields and sub-fields."""

    __slots__ = ("_rules", "_conditionals", "alias", "error_message")

    def __init__(self) -> None:
        self._rules: dict[str, tuple] = {}
        self._conditionals: list[ConditionalValidation] = []
        self.alias: str | None = None
        self.error_message: str | None = None

    @property
    def rules(self) -> dict[str, tuple]:
        """Attached rules in first-insertion order (a copy)."""
        return dict(self._rules)

    @property
    def conditionals(self) -> tuple[ConditionalValidation, ...]: return tuple(self._conditionals)

    def add_rule(self, name: str, args: Sequence[Any] = ()) -> None:
        self._rules[name] = tuple(args)

    def remove_rule(self, name: str) -> bool:
        return self._rules.pop(name, None) is not None

    def has_rule(self, name: str) -> bool: return name in self._rules

    def add_conditional_rule(self, name: str, args: Sequence[Any], conditions: Sequence[Condition],
                             logic: ConditionLogic = ConditionLogic.AND) -> ConditionalValidation:
        conditional = ConditionalValidation(conditions=tuple(conditions), rule_name=name, rule_args=tuple(args), logic=logic)
        self._conditionals.append(conditional)
        return conditional

    def set_alias(self, alias: str | None) -> None: self.alias = alias

    def set_error_message(self, message: str | None) -> None: self.error_message = message

    @property
    def display_name(self) -> str: return self.alias or self.key

    @property
    def key(self) -> str:
        raise NotImplementedError


class SubFieldHandler(_RuleTarget):
    """Rules for a nested location reached by walking ``path`` under a parent field."""

    __slots__ = ("parent", "path")

    def __init__(self, parent: str, path: Sequence[str]):
        if not path:
            raise ValueError("Sub-field path must contain at least one segment")
        super().__init__()
        self.parent = parent
        self.path: tuple[str, ...] = tuple(str(segment) for segment in path)

    @property
    def key(self) -> str:
        """Error-report key: ``parent.seg1.seg2``."""
        return ".".join((self.parent, *self.path))

    def __repr__(self) -> str:
        return f"SubFieldHandler({self.key!r}, rules={list(self._rules)})"


class SubFieldCollection:
    """Sub-fields owned by one field, keyed by path and kept in first-address order."""

    __slots__ = ("_parent", "_items")

    def __init__(self, parent: str):
        self._parent = parent
        self._items: dict[tuple[str, ...], SubFieldHandler] = {}

    def add(self, path: Sequence[str]) -> SubFieldHandler:
        """Create-or-return the handler for ``path``."""
        key = tuple(str(segment) for segment in path)
        if (handler := self._items.get(key)) is None:
            handler = self._items[key] = SubFieldHandler(self._parent, key)
        return handler

    def get(self, path: Sequence[str]) -> SubFieldHandler | None:
        return self._items.get(tuple(str(segment) for segment in path))

    def remove(self, path: Sequence[str]) -> bool:
        return self._items.pop(tuple(str(segment) for segment in path), None) is not None

    def paths(self) -> list[tuple[str, ...]]: return list(self._items)

    def __iter__(self) -> Iterator[SubFieldHandler]: return iter(list(self._items.values()))

    def __len__(self) -> int: return len(self._items)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (tuple, list)) and tuple(str(s) for s in path) in self._items


class FieldHandler(_RuleTarget):
    """Rules for one top-level key of the input object."""

    __slots__ = ("name", "sub_fields")

    def __init__(self, name: str):
        super().__init__()
        self.name = name
        self.sub_fields = SubFieldCollection(name)

    @property
    def key(self) -> str: return self.name

    def add_sub_field(self, path: Sequence[str]) -> SubFieldHandler: return self.sub_fields.add(path)

    def get_sub_field(self, path: Sequence[str]) -> SubFieldHandler | None: return self.sub_fields.get(path)

    def __repr__(self) -> str:
        return f"FieldHandler({self.name!r}, rules={list(self._rules)}, sub_fields={len(self.sub_fields)})"


class FieldCollection:
    """All fields of one session in first-address order."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[str, FieldHandler] = {}

    def add(self, name: str) -> FieldHandler:
        """Create-or-return the handler for ``name``."""
        if (handler := self._items.get(name)) is None:
            handler = self._items[name] = FieldHandler(name)
        return handler

    def get(self, name: str) -> FieldHandler | None: return self._items.get(name)

    def remove(self, name: str) -> bool: return self._items.pop(name, None) is not None

    def names(self) -> list[str]: return list(self._items)

    def clear(self) -> None: self._items.clear()

    def __iter__(self) -> Iterator[FieldHandler]: return iter(list(self._items.values()))

    def __len__(self) -> int: return len(self._items)

    def __contains__(self, name: object) -> bool: return name in self._items
