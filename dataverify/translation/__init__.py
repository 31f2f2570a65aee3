"""Message rendering for validation failures.

Catalogs live in memory as Python mappings; nothing is read from disk.
"""
from .loaders import CatalogLoader, LoaderFactory, MappingLoader
from .manager import DEFAULT_MESSAGE, VALIDATORS_DOMAIN, TranslationManager, reset_base_translator
from .translator import CatalogTranslator, Translator, format_value

__all__ = [
    "CatalogLoader",
    "CatalogTranslator",
    "DEFAULT_MESSAGE",
    "LoaderFactory",
    "MappingLoader",
    "TranslationManager",
    "Translator",
    "VALIDATORS_DOMAIN",
    "format_value",
    "reset_base_translator",
]
