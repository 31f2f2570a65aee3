"""Documentation generators and the dataverify-docs command."""
from __future__ import annotations

import json
import logging

import pytest
import structlog

from dataverify.cli import build_parser, main
from dataverify.docs import (
    GENERATORS,
    JSONSchemaGenerator,
    ListGenerator,
    MarkdownGenerator,
    OpenAPIGenerator,
    annotation_to_schema,
    generate_all,
    get_generator,
    rule_schema,
)
from dataverify.validation import StrategyRegistry


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestAnnotations:
    @pytest.mark.parametrize("annotation, expected", [
        ("int", {"type": "integer"}),
        ("bool", {"type": "boolean"}),
        ("Sequence[str]", {"type": "array"}),
        ("str | Sequence[str]", {"oneOf": [{"type": "string"}, {"type": "array"}]}),
        ("Any", {}),
        (None, {}),
    ])
    def test_annotation_to_schema(self, annotation, expected):
        assert annotation_to_schema(annotation) == expected

    def test_rule_schema(self, registry):
        schema = rule_schema(registry.metadata("url"))

        assert schema["title"] == "Url"
        assert schema["x-category"] == "String"
        assert "required" not in schema
        assert schema["properties"]["require_tld"]["default"] is True
        assert schema["properties"]["require_tld"]["type"] == "boolean"

    def test_required_parameters(self, registry):
        schema = rule_schema(registry.metadata("between"))
        assert schema["required"] == ["min", "max"]


class TestGenerators:
    def test_markdown(self, registry):
        output = MarkdownGenerator(title="Rules").generate(registry)

        assert output.startswith("# Rules\n")
        assert "## Table of Contents" in output
        assert "### `min_length`" in output
        assert "| `min` | `int` | yes |" in output
        assert 'dv.field("password").min_length(8)' in output

    def test_markdown_empty_registry(self):
        assert MarkdownGenerator().generate(StrategyRegistry()) == "No validations registered.\n"

    def test_list(self, registry):
        lines = ListGenerator().generate(registry).splitlines()

        assert lines[0] == "Available validations:"
        assert lines[1:] == [f"- {name}" for name in registry.names()]

    def test_json(self, registry):
        data = json.loads(get_generator("json").generate(registry))

        assert data["min_length"]["category"] == "String"
        assert data["required"]["runs_on_empty"] is True

    def test_json_schema(self, registry):
        data = json.loads(JSONSchemaGenerator(title="T").generate(registry))

        assert data["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert data["title"] == "T"
        assert set(data["properties"]) == set(registry.names())

    def test_openapi(self, registry):
        data = json.loads(OpenAPIGenerator(version="2.1.0").generate(registry))

        assert data["openapi"] == "3.1.0"
        assert data["info"]["version"] == "2.1.0"
        assert data["paths"] == {}
        assert "email" in data["components"]["schemas"]

    def test_generators_never_register(self, registry):
        before = registry.names()
        generate_all(registry)
        assert registry.names() == before

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown documentation format"):
            get_generator("pdf")

    def test_options_are_filtered_per_generator(self):
        assert isinstance(get_generator("list", title="ignored", version="9"), ListGenerator)
        assert get_generator("markdown", title="X", version="9").title == "X"
        assert get_generator("openapi", title=None).title == "DataVerify Validation Rules"


class TestCli:
    def test_parser_defaults(self):
        args = build_parser().parse_args([])

        assert args.format == "markdown"
        assert args.output is None
        assert args.version == "1.0.0"

    def test_stdout(self, capsys, restore_logging):
        assert main(["--format", "list"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Available validations:\n")
        assert "- required\n" in out

    def test_all_requires_output(self, restore_logging):
        assert main(["--format", "all"]) == 2

    def test_writes_every_format(self, tmp_path, restore_logging):
        assert main(["--format", "all", "--output", str(tmp_path / "docs")]) == 0

        written = sorted(p.name for p in (tmp_path / "docs").iterdir())
        assert len(written) == len(GENERATORS)
        assert "validations.md" in written
        openapi = json.loads((tmp_path / "docs" / "validations.openapi.json").read_text(encoding="utf-8"))
        assert openapi["info"]["version"] == "1.0.0"

    def test_single_format_to_directory(self, tmp_path, restore_logging):
        assert main(["-f", "jsonschema", "-o", str(tmp_path), "--title", "Schema"]) == 0

        data = json.loads((tmp_path / "validations.schema.json").read_text(encoding="utf-8"))
        assert data["title"] == "Schema"

    def test_invalid_format_exits(self):
        with pytest.raises(SystemExit):
            main(["--format", "pdf"])
