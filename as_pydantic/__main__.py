"""Print the JSON Schema of a synthesized model.

Run with: python -m as_pydantic myapp.models:Order [--indent 2] [--log-level DEBUG] [--json-logs]
"""
import argparse
import importlib
import json
import sys
from typing import Any

from as_pydantic.config import settings
from as_pydantic.errors import SchemaSynthesisError
from as_pydantic.integration import model_to_schema
from as_pydantic.logging import bind_context, configure_logging, get_logger

log = get_logger("cli")


def load_object(reference: str) -> Any:
    """Import "package.module:Attr.Nested" and return the attribute."""
    module_name, sep, path = reference.partition(":")
    if not sep or not module_name or not path:
        raise ValueError(f"Expected 'module:Class', got '{reference}'")
    obj: Any = importlib.import_module(module_name)
    for part in path.split("."):
        obj = getattr(obj, part)
    return obj


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m as_pydantic",
        description="Synthesize a pydantic model from a metadata-decorated class and print its JSON Schema",
    )
    parser.add_argument("model", help="Model class reference, e.g. myapp.models:Order")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help=f"Log level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON, help="Emit logs as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.json_logs)
    bind_context(command="schema", target=args.model)

    try:
        target = load_object(args.model)
    except (ImportError, AttributeError, ValueError) as e:
        log.error("model_load_failed", error=str(e))
        return 2

    try:
        schema = model_to_schema(target)
    except SchemaSynthesisError as e:
        log.error("synthesis_failed", **e.error.to_dict())
        return 1
    except TypeError as e:
        log.error("synthesis_failed", error=str(e))
        return 1

    print(json.dumps(schema.model_json_schema(), indent=args.indent, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
