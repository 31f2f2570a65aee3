"""Presence rules."""
from __future__ import annotations

from typing import Any

from ..strategy import ValidationStrategy
from ..traversal import is_blank


class Required(ValidationStrategy):
    name = "required"
    description = "Validates that a value is present and not empty. Booleans and numbers (including 0) are present"
    category = "Core"
    examples = ('dv.field("email").required()',)
    runs_on_empty = True

    def handler(self, value: Any) -> bool: return not is_blank(value)
