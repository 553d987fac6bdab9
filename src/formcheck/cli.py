"""CLI entry point for formcheck."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from formcheck import __version__, logger
from formcheck.exceptions import PackageError
from formcheck.logging import configure_logging
from formcheck.page_loader import load_page
from formcheck.pages import validate_page
from formcheck.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="formcheck")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON payload against a page document")
    validate_parser.add_argument("--page", required=True, type=Path, dest="page_path")
    validate_parser.add_argument("--payload", required=True, type=Path, dest="payload_path")
    validate_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    return parser


def _load_payload(path: Path) -> dict[str, Any]:
    """Read the submitted data.

    Args:
        path (Path): JSON object file.

    Raises:
        PackageError: If the file is not a JSON object.

    Returns:
        dict[str, Any]: Payload.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PackageError(f"Cannot read payload {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise PackageError(f"Payload must be a JSON object: {path}")  # noqa: TRY004
    return payload


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 when the page is valid, 1 on errors or failure).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "validate":
        parser.print_help()
        return 0

    try:
        page = load_page(args.page_path)
        payload = _load_payload(args.payload_path)
        report = validate_page(payload, page)
    except PackageError:
        logger.exception("Validation failed")
        return 1

    rendered = json.dumps(report.model_dump(mode="json", by_alias=True), indent=2)
    if args.output_path is None:
        sys.stdout.write(rendered + "\n")
    else:
        args.output_path.parent.mkdir(parents=True, exist_ok=True)
        args.output_path.write_text(rendered, encoding="utf-8")
        logger.info("Report written", extra={"output_path": str(args.output_path)})
    return 1 if report.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
