"""CLI entry point for inspecting office metadata XML.

Usage::

    python -m docmeta.cli docProps/core.xml [meta.xml ...] [--custom docProps/custom.xml]

Each positional file is decoded as core-properties or ODF meta XML, each
``--custom`` file as a custom properties part. The combined result is
printed to stdout as one JSON object.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from docmeta.core.config import Settings, get_settings
from docmeta.metadata import custom_properties_to_dict, decode_custom_properties, decode_metadata

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docmeta",
        description="Decode metadata from extracted office document XML parts.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="core.xml or meta.xml files to decode.",
    )
    parser.add_argument(
        "--custom",
        action="append",
        default=[],
        type=Path,
        metavar="FILE",
        help="custom.xml file to decode (repeatable).",
    )
    parser.add_argument(
        "--strict-timestamps",
        action="store_true",
        default=None,
        help="Drop created/modified values that are not valid timestamps.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: DOCMETA_LOG_LEVEL or INFO).",
    )
    args = parser.parse_args(argv)
    if not args.files and not args.custom:
        parser.error("at least one metadata file or --custom file is required")
    return args


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"docmeta: cannot read {path}: {e}") from e


def _settings_for(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.strict_timestamps is not None:
        settings = settings.model_copy(update={"strict_timestamps": args.strict_timestamps})
    return settings


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Decode every requested file and return the combined JSON payload."""
    settings = _settings_for(args)
    output: dict[str, Any] = {"files": {}, "custom": {}}

    for path in args.files:
        logger.info("Decoding metadata from %s", path)
        output["files"][str(path)] = decode_metadata(_read(path), settings).to_dict()

    for path in args.custom:
        logger.info("Decoding custom properties from %s", path)
        properties = decode_custom_properties(_read(path), settings)
        output["custom"][str(path)] = custom_properties_to_dict(properties)

    return output


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = _parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    output = run(args)
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
