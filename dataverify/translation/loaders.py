"""Catalog loaders.

A loader turns a translation resource into a flat ``{message_id: template}``
mapping. Resources are in-memory only; the factory picks the first loader
whose ``supports()`` accepts the resource.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from dataverify.errors import ErrorCode, TranslationResourceError


class CatalogLoader(ABC):
    """Base class for translation resource loaders."""

    @abstractmethod
    def supports(self, resource: Any) -> bool:
        """Whether this loader understands ``resource``."""

    @abstractmethod
    def load(self, resource: Any, locale: str, domain: str) -> dict[str, str]:
        """Return the messages of ``resource``."""


class MappingLoader(CatalogLoader):
    """Loads messages from a mapping of string ids to string templates.

    Nested mappings are flattened with dots, so ``{"validation": {"email": ...}}``
    yields ``validation.email``.
    """

    def supports(self, resource: Any) -> bool: return isinstance(resource, Mapping)

    def load(self, resource: Any, locale: str, domain: str) -> dict[str, str]:
        if not isinstance(resource, Mapping):
            raise TranslationResourceError(f"Mapping loader cannot load {type(resource).__name__} for '{locale}'")
        return self._flatten(resource, prefix="")

    def _flatten(self, resource: Mapping, prefix: str) -> dict[str, str]:
        messages: dict[str, str] = {}
        for key, template in resource.items():
            if not isinstance(key, str) or not key:
                raise TranslationResourceError(f"Translation keys must be non-empty strings, got {key!r}")
            full_key = f"{prefix}{key}"
            if isinstance(template, Mapping):
                messages.update(self._flatten(template, prefix=f"{full_key}."))
            elif isinstance(template, str):
                messages[full_key] = template
            else:
                raise TranslationResourceError(
                    f"Translation '{full_key}' must be a string, got {type(template).__name__}")
        return messages


class LoaderFactory:
    """Resolves the loader for a resource."""

    def __init__(self, loaders: list[CatalogLoader] | None = None):
        self._loaders: list[CatalogLoader] = list(loaders or [])

    @classmethod
    def create_default(cls) -> LoaderFactory: return cls([MappingLoader()])

    def add_loader(self, loader: CatalogLoader) -> None: self._loaders.append(loader)

    def get_loader(self, resource: Any) -> CatalogLoader:
        for loader in self._loaders:
            if loader.supports(resource):
                return loader
        raise TranslationResourceError(f"No loader supports resources of type {type(resource).__name__}",
                                       code=ErrorCode.E5002_NO_LOADER)
