"""Validation Context

The cursor used while rule chains are built. Addressing a field or
sub-field pushes its handler; nothing is popped. Chain operations always
act on the top of the stack, and ``current_field`` walks down the stack
skipping sub-field entries.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataverify.errors import NoActiveTargetError

from .conditions import Condition, ConditionalValidation, ConditionLogic
from .handlers import FieldCollection, FieldHandler, SubFieldHandler

Handler = FieldHandler | SubFieldHandler


class ValidationContext:
    """Field tree plus the handler stack for one validation session."""

    def __init__(self) -> None:
        self._fields = FieldCollection()
        self._stack: list[Handler] = []

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def address_field(self, name: str) -> FieldHandler:
        handler = self._fields.add(name)
        self._stack.append(handler)
        return handler

    def address_sub_field(self, *path: str) -> SubFieldHandler:
        """Create-or-return the sub-field at ``path`` under the current field."""
        if not path:
            raise ValueError("address_sub_field() requires at least one path segment")
        if (owner := self.current_field()) is None:
            raise NoActiveTargetError("subfield")
        handler = owner.add_sub_field(path)
        self._stack.append(handler)
        return handler

    def current(self) -> Handler | None: return self._stack[-1] if self._stack else None

    def current_field(self) -> FieldHandler | None:
        for handler in reversed(self._stack):
            if isinstance(handler, FieldHandler):
                return handler
        return None

    @property
    def stack(self) -> tuple[Handler, ...]: return tuple(self._stack)

    @property
    def fields(self) -> FieldCollection: return self._fields

    def reset(self) -> None:
        """Forget every field and the cursor; the next chain starts from scratch."""
        self._fields.clear()
        self._stack.clear()

    # ------------------------------------------------------------------
    # Chain operations
    # ------------------------------------------------------------------

    def _require_current(self, operation: str) -> Handler:
        if (handler := self.current()) is None:
            raise NoActiveTargetError(operation)
        return handler

    def add_rule(self, name: str, args: Sequence[Any] = ()) -> None:
        self._require_current(name).add_rule(name, args)

    def add_conditional_rule(self, name: str, args: Sequence[Any], conditions: Sequence[Condition],
                             logic: ConditionLogic = ConditionLogic.AND) -> ConditionalValidation:
        return self._require_current(name).add_conditional_rule(name, args, conditions, logic)

    def set_alias(self, alias: str | None) -> None:
        self._require_current("alias").set_alias(alias)

    def set_error_message(self, message: str | None) -> None:
        self._require_current("error_message").set_error_message(message)
