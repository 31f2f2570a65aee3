"""Value lookup over arbitrary input structures.

Inputs can be mappings, attribute objects (dataclasses, SimpleNamespace,
plain instances) or any nesting of those with lists and tuples. A missing
segment anywhere along a path resolves to ``None``; lookups never raise and
never mutate the input.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

_MISSING = object()


def _get_segment(container: Any, segment: str) -> Any:
    if container is None:
        return _MISSING
    if isinstance(container, Mapping):
        return container.get(segment, _MISSING)
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        try:
            index = int(segment)
            if index < 0:
                return _MISSING
            return container[index]
        except (ValueError, IndexError):
            return _MISSING
    if isinstance(container, (str, bytes, int, float, bool, Decimal)):
        return _MISSING
    return getattr(container, segment, _MISSING)


class DataTraverser:
    """Read-only accessor bound to one input object."""

    def __init__(self, data: Any):
        self.data = data

    def get_value(self, name: str) -> Any:
        """Value of a top-level key, ``None`` when absent."""
        value = _get_segment(self.data, name)
        return None if value is _MISSING else value

    def get_field_value(self, field: str) -> Any:
        """Value of a top-level key or a dotted path such as ``user.type``.

        A top-level key that itself contains dots wins over path traversal.
        """
        direct = _get_segment(self.data, field)
        if direct is not _MISSING or "." not in field:
            return None if direct is _MISSING else direct
        return self.traverse_path(self.data, field.split("."))

    @staticmethod
    def traverse_path(data: Any, path: Sequence[str]) -> Any:
        """Walk ``path`` from ``data``; any missing step yields ``None``."""
        current = data
        for segment in path:
            current = _get_segment(current, segment)
            if current is _MISSING:
                return None
        return current


def is_blank(value: Any) -> bool:
    """Whether a value counts as absent for validation purposes.

    Booleans and numbers are never blank, so ``False``, ``0`` and ``0.0``
    are present values; numeric strings such as ``"0"`` are non-empty
    strings and therefore present too.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float, Decimal)):
        return False
    if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return not vars(value)
    return False
