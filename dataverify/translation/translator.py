"""Translators render message ids into localized strings."""
from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from .loaders import LoaderFactory

DEFAULT_DOMAIN = "messages"


@runtime_checkable
class Translator(Protocol):
    """Anything that can render a message id with parameters."""

    locale: str

    def trans(self, key: str, params: Mapping[str, Any] | None = None, domain: str | None = None,
              locale: str | None = None) -> str: ...


def format_value(value: Any) -> str:
    """Render a parameter or failing value for display inside a message."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return "list"
    return type(value).__name__


class CatalogTranslator:
    """In-memory translator: ``locale -> domain -> {id: template}``.

    Lookups fall back to ``fallback_locale``; an id missing from both is
    returned unchanged.
    """

    def __init__(self, locale: str = "en", fallback_locale: str = "en", loader_factory: LoaderFactory | None = None):
        self.locale = locale
        self.fallback_locale = fallback_locale
        self._loader_factory = loader_factory or LoaderFactory.create_default()
        self._catalogs: dict[str, dict[str, dict[str, str]]] = {}

    def add_resource(self, resource: Any, locale: str, domain: str = DEFAULT_DOMAIN) -> None:
        messages = self._loader_factory.get_loader(resource).load(resource, locale, domain)
        catalog = self._catalogs.setdefault(locale, {}).setdefault(domain, {})
        catalog.update(messages)

    def has(self, key: str, domain: str = DEFAULT_DOMAIN, locale: str | None = None) -> bool:
        return self._lookup(key, locale or self.locale, domain) is not None

    def locales(self) -> list[str]: return sorted(self._catalogs)

    def _lookup(self, key: str, locale: str, domain: str) -> str | None:
        return self._catalogs.get(locale, {}).get(domain, {}).get(key)

    def trans(self, key: str, params: Mapping[str, Any] | None = None, domain: str | None = None,
              locale: str | None = None) -> str:
        locale, domain = locale or self.locale, domain or DEFAULT_DOMAIN
        template = self._lookup(key, locale, domain)
        if template is None and locale != self.fallback_locale:
            template = self._lookup(key, self.fallback_locale, domain)
        if template is None:
            return key
        return self.replace_placeholders(template, params or {})

    @staticmethod
    def replace_placeholders(template: str, params: Mapping[str, Any]) -> str:
        """Substitute ``{name}`` placeholders; unknown placeholders are left in place."""
        message = template
        for name, value in params.items():
            placeholder = name if name.startswith("{") else f"{{{name}}}"
            message = message.replace(placeholder, value if isinstance(value, str) else format_value(value))
        return message

    def copy(self) -> CatalogTranslator:
        """Independent copy whose locale and catalogs can change without affecting this one."""
        clone = CatalogTranslator(self.locale, self.fallback_locale, self._loader_factory)
        clone._catalogs = copy.deepcopy(self._catalogs)
        return clone
