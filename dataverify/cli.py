"""Generate reference documentation for the registered validation rules.

Run with: dataverify-docs [--format FORMAT] [--output DIR]
      or: python3 -m dataverify.cli --format all --output docs/
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dataverify.config import get_settings
from dataverify.docs import FILE_EXTENSIONS, GENERATORS, generate_all, get_generator
from dataverify.logging import configure_logging, get_logger
from dataverify.validation import default_registry


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="dataverify-docs",
        description="Generate documentation for DataVerify validation rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dataverify-docs                                  # Markdown on stdout
  dataverify-docs --format openapi --version 2.0.0
  dataverify-docs --format all --output docs/      # One file per format
""",
    )
    parser.add_argument("--format", "-f", default="markdown", choices=[*GENERATORS, "all"],
                        help="Output format (default: markdown)")
    parser.add_argument("--output", "-o", type=Path, help="Directory to write files into (default: stdout)")
    parser.add_argument("--title", help="Document title")
    parser.add_argument("--version", default="1.0.0", help="Document version for OpenAPI output (default: 1.0.0)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help=f"Log level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON, help="Emit JSON logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.json_logs)
    log = get_logger("dataverify.cli")

    registry = default_registry()
    if args.format == "all":
        outputs = generate_all(registry, title=args.title, version=args.version)
    else:
        outputs = {args.format: get_generator(args.format, title=args.title, version=args.version).generate(registry)}

    if args.output is None:
        if len(outputs) > 1:
            log.error("output_required", format=args.format, reason="--format all writes one file per format")
            return 2
        sys.stdout.write(next(iter(outputs.values())))
        return 0

    args.output.mkdir(parents=True, exist_ok=True)
    for fmt, content in outputs.items():
        path = args.output / f"validations.{FILE_EXTENSIONS[fmt]}"
        path.write_text(content, encoding="utf-8")
        log.info("documentation_written", format=fmt, path=str(path), rules=len(registry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
