"""Command-line interface for comparing JSON/YAML documents."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, cast

import numpy as np
import yaml

from deep_close.compare import recursive_check
from deep_close.config import ComparisonConfig, build_config, load_config
from deep_close.discrepancy import format_path
from deep_close.logging import configure_logging

LOGGER = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser."""

    parser = argparse.ArgumentParser(prog="deep-close")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for JSON diagnostics written to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    compare_parser = subparsers.add_parser(
        "compare", help="Compare a received document against an expected document"
    )
    compare_parser.add_argument("received", type=Path, help="Received JSON or YAML document.")
    compare_parser.add_argument("expected", type=Path, help="Expected JSON or YAML document.")
    compare_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with precision/strict/max_depth settings.",
    )
    compare_parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Number of decimal places numbers must agree to.",
    )
    compare_parser.add_argument(
        "--subset",
        action="store_true",
        help="Allow received mappings to carry keys missing from expected.",
    )
    compare_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Fail when documents nest deeper than this many containers.",
    )
    compare_parser.set_defaults(handler=_compare_command)
    return parser


def load_document(path: Path) -> Any:
    """Load a JSON document (``NaN``/``Infinity`` allowed) or a YAML document."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Unable to read document '{path}': {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in document '{path}': {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in document '{path}': {exc}") from exc


def _resolve_settings(args: argparse.Namespace) -> ComparisonConfig:
    config = load_config(args.config) if args.config is not None else ComparisonConfig()
    overrides: dict[str, Any] = {}
    if args.precision is not None:
        overrides["precision"] = args.precision
    if args.subset:
        overrides["strict"] = False
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if not overrides:
        return config
    return build_config({**config.model_dump(), **overrides})


def _json_default(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return repr(value)


def _compare_command(args: argparse.Namespace) -> int:
    try:
        settings = _resolve_settings(args)
        received = load_document(args.received)
        expected = load_document(args.expected)
        discrepancy = recursive_check(
            received,
            expected,
            settings.precision,
            settings.strict,
            max_depth=settings.max_depth,
        )
    except ValueError as exc:
        LOGGER.error("compare_failed received=%s expected=%s", args.received, args.expected)
        print(f"deep-close: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    settings_fields = {"precision": settings.precision, "strict": settings.strict}
    if discrepancy is None:
        LOGGER.info(
            "compare_match received=%s expected=%s",
            args.received,
            args.expected,
            extra=settings_fields,
        )
        print("match")
        return EXIT_MATCH

    payload = discrepancy.to_dict()
    payload["path"] = format_path(discrepancy.path)
    LOGGER.info(
        "compare_mismatch received=%s expected=%s",
        args.received,
        args.expected,
        extra={**settings_fields, "reason": discrepancy.reason, "path": payload["path"]},
    )
    print(json.dumps(payload, sort_keys=True, default=_json_default))
    return EXIT_MISMATCH


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    command_handler = cast(Callable[[argparse.Namespace], int], handler)
    return command_handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
