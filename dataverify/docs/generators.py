"""Documentation Generators

Render the rule registry as reference documentation. Generators only read
registry metadata; they never touch handlers or register anything.

Formats:
- markdown: reference grouped by category with parameter tables
- list: plain list of rule names
- json: raw metadata keyed by rule name
- jsonschema: JSON Schema draft 2020-12 with one property per rule
- openapi: OpenAPI 3.1 document with one component schema per rule
"""
from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Any

from dataverify.validation.registry import StrategyRegistry
from dataverify.validation.strategy import ParameterDescriptor, RuleMetadata

TYPE_MAP: dict[str, str] = {
    "int": "integer",
    "float": "number",
    "Decimal": "number",
    "bool": "boolean",
    "str": "string",
    "date": "string",
    "datetime": "string",
    "list": "array",
    "tuple": "array",
    "Sequence": "array",
    "dict": "object",
    "Mapping": "object",
}


def _group_by_category(registry: StrategyRegistry) -> dict[str, list[RuleMetadata]]:
    groups: dict[str, list[RuleMetadata]] = {}
    for metadata in registry.all_metadata(): groups.setdefault(metadata.category or "Other", []).append(metadata)
    return dict(sorted(groups.items()))


def _json_dumps(data: Any) -> str: return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def annotation_to_schema(annotation: str | None) -> dict[str, Any]:
    """JSON Schema fragment for a handler annotation such as ``int`` or ``str | Sequence[str]``."""
    if not annotation or annotation == "Any":
        return {}
    types: list[str] = []
    for part in annotation.split("|"):
        base = re.split(r"[\[\s]", part.strip(), maxsplit=1)[0].rsplit(".", 1)[-1]
        if base == "None":
            types.append("null")
        elif (json_type := TYPE_MAP.get(base)) is not None and json_type not in types:
            types.append(json_type)
    if not types:
        return {}
    return {"type": types[0]} if len(types) == 1 else {"oneOf": [{"type": t} for t in types]}


def rule_schema(metadata: RuleMetadata) -> dict[str, Any]:
    """Schema object describing one rule and its parameters."""
    properties: dict[str, Any] = {}
    required: list[str] = []
    for param in metadata.parameters:
        prop: dict[str, Any] = {**annotation_to_schema(param.annotation),
                                "description": param.description or f"Parameter: {param.name}"}
        if param.variadic:
            prop = {"type": "array", "description": prop["description"]}
        if param.example is not None:
            prop["examples"] = [param.example]
        if not param.required and not param.variadic:
            prop["default"] = param.default
        properties[param.name] = prop
        if param.required:
            required.append(param.name)

    schema: dict[str, Any] = {
        "type": "object",
        "title": metadata.name.replace("_", " ").capitalize(),
        "description": metadata.description or f"Validation rule: {metadata.name}",
        "x-category": metadata.category,
        "properties": properties,
    }
    if required:
        schema["required"] = required
    if metadata.examples:
        schema["x-examples"] = list(metadata.examples)
    return schema


class DocumentationGenerator(ABC):
    """Base class for registry documentation generators."""

    format_name: str = ""

    @abstractmethod
    def generate(self, registry: StrategyRegistry) -> str:
        """Render the registry."""


class MarkdownGenerator(DocumentationGenerator):
    """Reference document grouped by category."""

    format_name = "markdown"

    def __init__(self, title: str = "Validation Rules Reference"): self.title = title

    def generate(self, registry: StrategyRegistry) -> str:
        if not len(registry):
            return "No validations registered.\n"
        groups = _group_by_category(registry)
        lines = [f"# {self.title}", "", f"Reference of all **{len(registry)}** registered validation rules.", "",
                 "## Table of Contents", ""]
        for category, rules in groups.items():
            lines.append(f"- [{category}](#{category.lower().replace(' ', '-')}) ({len(rules)} rules)")
        lines += ["", "---", ""]
        for category, rules in groups.items():
            lines += [f"## {category}", ""]
            for metadata in rules:
                lines += self._rule_section(metadata)
        return "\n".join(lines).rstrip() + "\n"

    def _rule_section(self, metadata: RuleMetadata) -> list[str]:
        lines = [f"### `{metadata.name}`", "", metadata.description or "Validation rule", ""]
        if metadata.parameters:
            lines += ["| Name | Type | Required | Default | Description |", "|---|---|---|---|---|"]
            lines += [self._parameter_row(p) for p in metadata.parameters]
            lines.append("")
        if metadata.runs_on_empty:
            lines += ["Runs on empty values.", ""]
        if metadata.examples:
            lines += ["**Usage:**", "", "```python", *metadata.examples, "```", ""]
        return lines

    @staticmethod
    def _parameter_row(param: ParameterDescriptor) -> str:
        default = "" if param.required else f"`{param.default!r}`"
        description = param.description
        if param.example is not None:
            description = f"{description} (e.g. `{param.example!r}`)".strip()
        required = "yes" if param.required else "no"
        return f"| `{param.name}` | `{param.annotation or 'Any'}` | {required} | {default} | {description} |"


class ListGenerator(DocumentationGenerator):
    format_name = "list"

    def generate(self, registry: StrategyRegistry) -> str:
        return "Available validations:\n" + "".join(f"- {name}\n" for name in registry.names())


class JSONGenerator(DocumentationGenerator):
    format_name = "json"

    def generate(self, registry: StrategyRegistry) -> str:
        return _json_dumps({m.name: m.model_dump(mode="json") for m in registry.all_metadata()})


class JSONSchemaGenerator(DocumentationGenerator):
    """JSON Schema draft 2020-12."""

    format_name = "jsonschema"

    def __init__(self, title: str = "DataVerify Validations"): self.title = title

    def generate(self, registry: StrategyRegistry) -> str:
        return _json_dumps({
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "title": self.title,
            "type": "object",
            "properties": {m.name: rule_schema(m) for m in registry.all_metadata()},
        })


class OpenAPIGenerator(DocumentationGenerator):
    """OpenAPI 3.1 document with a component schema per rule."""

    format_name = "openapi"

    def __init__(self, title: str = "DataVerify Validation Rules", version: str = "1.0.0"):
        self.title, self.version = title, version

    def generate(self, registry: StrategyRegistry) -> str:
        metadata = registry.all_metadata()
        return _json_dumps({
            "openapi": "3.1.0",
            "info": {
                "title": self.title,
                "description": f"Reference of {len(metadata)} validation rules.",
                "version": self.version,
            },
            "paths": {},
            "components": {"schemas": {m.name: rule_schema(m) for m in metadata}},
        })


GENERATORS: dict[str, type[DocumentationGenerator]] = {
    g.format_name: g for g in (MarkdownGenerator, ListGenerator, JSONGenerator, JSONSchemaGenerator, OpenAPIGenerator)
}

FILE_EXTENSIONS = {"markdown": "md", "list": "txt", "json": "json", "jsonschema": "schema.json", "openapi": "openapi.json"}


def get_generator(fmt: str, **options: Any) -> DocumentationGenerator:
    """Instantiate the generator for ``fmt``; options the generator does not take are ignored."""
    if (generator := GENERATORS.get(fmt.lower())) is None:
        raise ValueError(f"Unknown documentation format '{fmt}'. Available: {', '.join(GENERATORS)}")
    accepted = {k: v for k, v in options.items() if k in ("title", "version") and v is not None}
    if generator in (MarkdownGenerator, JSONSchemaGenerator):
        accepted.pop("version", None)
    if generator in (ListGenerator, JSONGenerator):
        accepted = {}
    return generator(**accepted)


def generate_all(registry: StrategyRegistry, **options: Any) -> dict[str, str]:
    """Every format rendered for ``registry``, keyed by format name."""
    return {fmt: get_generator(fmt, **options).generate(registry) for fmt in GENERATORS}
