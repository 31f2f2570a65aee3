"""Type rules."""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ..strategy import ValidationStrategy
from .numeric import to_number

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


class String(ValidationStrategy):
    name = "string"
    description = "Validates that a value is a string"
    category = "Type"
    examples = ('dv.field("name").string()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str)


class Int(ValidationStrategy):
    name = "int"
    description = "Validates that a value is an integer. In strict mode (default), only true integers are accepted"
    category = "Type"
    examples = ('dv.field("age").int()', 'dv.field("age").int(False)')
    param_docs = {"strict": ("Strict mode: true for integers only", True)}

    def handler(self, value: Any, strict: bool = True) -> bool:
        if isinstance(value, bool): return False
        if isinstance(value, int): return True
        return not strict and isinstance(value, str) and bool(_INT_PATTERN.match(value))


class Numeric(ValidationStrategy):
    name = "numeric"
    description = "Validates that a value is a number or a numeric string"
    category = "Type"
    examples = ('dv.field("price").numeric()',)

    def handler(self, value: Any) -> bool: return to_number(value) is not None


class Boolean(ValidationStrategy):
    name = "boolean"
    description = "Validates that a value is a boolean. In strict mode (default), only True/False are accepted"
    category = "Type"
    examples = ('dv.field("active").boolean()', 'dv.field("active").boolean(False)')
    param_docs = {"strict": ("Strict mode: true for booleans only", True)}

    def handler(self, value: Any, strict: bool = True) -> bool:
        if isinstance(value, bool): return True
        if strict: return False
        if isinstance(value, int): return value in (0, 1)
        return isinstance(value, str) and value in ("0", "1")


class List(ValidationStrategy):
    name = "list"
    description = "Validates that a value is a list or tuple"
    category = "Type"
    examples = ('dv.field("tags").list()',)

    def handler(self, value: Any) -> bool: return isinstance(value, (list, tuple))


class Dict(ValidationStrategy):
    name = "dict"
    description = "Validates that a value is a mapping"
    category = "Type"
    examples = ('dv.field("address").dict()',)

    def handler(self, value: Any) -> bool: return isinstance(value, Mapping)


class Object(ValidationStrategy):
    name = "object"
    description = "Validates that a value is an attribute object (not a primitive, mapping or sequence)"
    category = "Type"
    examples = ('dv.field("user").object()',)

    def handler(self, value: Any) -> bool:
        if isinstance(value, (str, bytes, bool, int, float, Decimal, Mapping, list, tuple, set, frozenset)):
            return False
        return hasattr(value, "__dict__") or hasattr(type(value), "__slots__")


class Json(ValidationStrategy):
    name = "json"
    description = "Validates that a string is valid JSON"
    category = "Type"
    examples = ('dv.field("payload").json()',)

    def handler(self, value: Any) -> bool:
        if not isinstance(value, str): return False
        try:
            json.loads(value)
        except ValueError:
            return False
        return True
