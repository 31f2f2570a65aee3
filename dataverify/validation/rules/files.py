"""File rules. Values are file-system paths; nothing is opened."""
from __future__ import annotations

import mimetypes
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..strategy import ValidationStrategy


def _as_file(value: Any) -> Path | None:
    if not isinstance(value, (str, os.PathLike)) or not str(value): return None
    path = Path(value)
    return path if path.is_file() else None


class FileExists(ValidationStrategy):
    name = "file_exists"
    description = "Validates that a path points to an existing file"
    category = "File"
    examples = ('dv.field("upload").file_exists()',)

    def handler(self, value: Any) -> bool: return _as_file(value) is not None


class FileMime(ValidationStrategy):
    name = "file_mime"
    description = "Validates that an existing file has an allowed MIME type (guessed from its name)"
    category = "File"
    examples = ('dv.field("avatar").file_mime("image/png")', 'dv.field("avatar").file_mime(["image/png", "image/jpeg"])')
    param_docs = {"mime": ("Allowed MIME type(s)", "image/jpeg")}

    def handler(self, value: Any, mime: str | Sequence[str]) -> bool:
        if (path := _as_file(value)) is None: return False
        detected, _ = mimetypes.guess_type(path.name)
        allowed = (mime,) if isinstance(mime, str) else tuple(mime)
        return detected is not None and detected in allowed
