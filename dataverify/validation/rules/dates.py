"""Date rules."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..strategy import ValidationStrategy


class Date(ValidationStrategy):
    name = "date"
    description = "Validates that a value is a date, or a string that matches a strftime format exactly"
    category = "Date"
    examples = ('dv.field("birthdate").date()', 'dv.field("created").date("%d/%m/%Y %H:%M")')
    param_docs = {"format": ("strftime format of the expected string", "%Y-%m-%d")}

    def handler(self, value: Any, format: str = "%Y-%m-%d") -> bool:
        if isinstance(value, date): return True
        if not isinstance(value, str): return False
        try:
            parsed = datetime.strptime(value, format)
        except ValueError:
            return False
        # strptime accepts unpadded fields ("2024-1-5"); round-tripping rejects them
        return parsed.strftime(format) == value
