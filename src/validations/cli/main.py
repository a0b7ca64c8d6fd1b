"""Demo CLI: validate an address book file and print the error report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from validations import __version__
from validations.addressbook import load_address_book
from validations.constants.branding import BRAND_NAME, CLI_DESCRIPTION, VALID_MESSAGE
from validations.constants.reporting import (
    BASE_LABEL,
    DEFAULT_OUTPUT_FORMAT,
    PATH_SEPARATOR,
    VALID_OUTPUT_FORMATS,
)
from validations.exceptions import EntryParseError
from validations.reporting import render
from validations.validate import check

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_cmd = subparsers.add_parser("check", help="Validate an address book YAML file")
    check_cmd.add_argument("file", type=Path, help="Address book YAML file")
    check_cmd.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Report format (default: text)",
    )
    check_cmd.add_argument("-s", "--separator", default=PATH_SEPARATOR, help="Field path separator")
    check_cmd.add_argument("--no-details", action="store_true", help="Omit error details from json/yaml reports")
    check_cmd.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; 0 when valid, 1 when invalid, 2 when the file cannot be parsed."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if not args.separator:
        print("Configuration error: --separator must not be empty", file=sys.stderr)
        return 2

    try:
        book = load_address_book(args.file)
    except EntryParseError as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        return 2

    errors = check(book)
    if errors is None:
        logger.debug("%s: %d entries valid", args.file, len(book.entries))
        print(VALID_MESSAGE)
        return 0

    print(
        render(
            errors,
            args.output_format,
            separator=args.separator,
            base_label=BASE_LABEL,
            include_details=not args.no_details,
        )
    )
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
