"""Translation manager: the engine's message renderer."""
from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import Any

from dataverify.config import get_settings
from dataverify.logging import translation_logger

from .catalogs import CATALOGS
from .translator import CatalogTranslator, Translator, format_value

VALIDATORS_DOMAIN = "validators"
DEFAULT_MESSAGE = "The field '{field}' failed the test '{test}'"

_BASE: CatalogTranslator | None = None
_BASE_LOCK = threading.Lock()


def _base_translator() -> CatalogTranslator:
    """Built-in catalogs, built once per process and never mutated afterwards."""
    global _BASE
    with _BASE_LOCK:
        if _BASE is None:
            settings = get_settings()
            base = CatalogTranslator(settings.DEFAULT_LOCALE, settings.FALLBACK_LOCALE)
            for locale, catalog in CATALOGS.items():
                base.add_resource(catalog, locale, VALIDATORS_DOMAIN)
            _BASE = base
        return _BASE


def reset_base_translator() -> None:
    """Forget the cached base catalogs (picks up changed settings)."""
    global _BASE
    with _BASE_LOCK:
        _BASE = None


def _format_param(value: Any) -> Any:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(format_value(v) for v in value)
    return value


class TranslationManager:
    """Per-session translator holder.

    Starts from a private copy of the built-in catalogs, so locale changes
    and added messages never leak into other sessions.
    """

    def __init__(self, translator: Translator | None = None, locale: str | None = None):
        self._translator: Translator | None = translator if translator is not None else _base_translator().copy()
        if locale:
            self.set_locale(locale)

    @property
    def translator(self) -> Translator | None: return self._translator

    def set_translator(self, translator: Translator | None) -> None: self._translator = translator

    @property
    def locale(self) -> str | None: return getattr(self._translator, "locale", None)

    def set_locale(self, locale: str) -> None:
        if self._translator is not None:
            self._translator.locale = locale

    def add_translations(self, messages: Mapping[str, Any], locale: str = "en") -> None:
        """Add or override ``validation.<rule>`` messages for ``locale``.

        Keys without a ``validation.`` prefix are taken as rule names.
        """
        if not isinstance(self._translator, CatalogTranslator):
            translation_logger().warning("translations_ignored", reason="custom translator", locale=locale)
            return
        normalized = {
            key if key == "validation" or key.startswith("validation.") else f"validation.{key}": template
            for key, template in messages.items()
        }
        self._translator.add_resource(normalized, locale, VALIDATORS_DOMAIN)

    def validation_message(self, test: str, field: str, value: Any, params: Mapping[str, Any] | None = None) -> str:
        """Render the failure message for rule ``test`` on ``field``."""
        if self._translator is None:
            return DEFAULT_MESSAGE.format(field=field, test=test)
        key = f"validation.{test}"
        parameters = {
            "field": field,
            "value": format_value(value),
            **{name: _format_param(v) for name, v in (params or {}).items()},
        }
        message = self._translator.trans(key, parameters, VALIDATORS_DOMAIN)
        if message == key:
            return DEFAULT_MESSAGE.format(field=field, test=test)
        return message
