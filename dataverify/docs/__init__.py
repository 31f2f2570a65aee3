"""Registry documentation: Markdown, plain list, JSON, JSON Schema and OpenAPI."""
from .generators import (
    FILE_EXTENSIONS,
    GENERATORS,
    DocumentationGenerator,
    JSONGenerator,
    JSONSchemaGenerator,
    ListGenerator,
    MarkdownGenerator,
    OpenAPIGenerator,
    annotation_to_schema,
    generate_all,
    get_generator,
    rule_schema,
)

__all__ = [
    "DocumentationGenerator",
    "MarkdownGenerator",
    "ListGenerator",
    "JSONGenerator",
    "JSONSchemaGenerator",
    "OpenAPIGenerator",
    "GENERATORS",
    "FILE_EXTENSIONS",
    "annotation_to_schema",
    "generate_all",
    "get_generator",
    "rule_schema",
]
