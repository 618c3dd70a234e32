"""Command line interface: convert an editor JSON document into page sections."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docpages.conversion import ConversionOptions, convert_document
from docpages.exceptions import DocpagesError
from docpages.schemas import DescriptionCapacity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docpages",
        description="Convert an editor JSON document into a titled page of HTML sections.",
    )
    parser.add_argument("file", help="Path to the JSON document, or - to read stdin")
    parser.add_argument("--page-id", required=True, help="Id of the page the sections belong to")
    parser.add_argument(
        "--description-capacity",
        choices=[capacity.value for capacity in DescriptionCapacity],
        default=None,
        help="How much leading content the untitled description section may hold",
    )
    parser.add_argument("--toc", action="store_true", help="Include a table of contents")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        raw = _read_input(args.file)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1

    options = ConversionOptions(include_toc=args.toc)
    if args.description_capacity:
        options.description_capacity = DescriptionCapacity(args.description_capacity)

    try:
        result = convert_document(raw, page_id=args.page_id, options=options)
    except (DocpagesError, ValueError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    exclude = None if args.toc else {"toc"}
    print(result.model_dump_json(indent=args.indent, exclude=exclude))
    return 0


def _read_input(file_arg: str) -> bytes:
    # Raw bytes; decoding errors surface as DocumentParseError during loading.
    if file_arg == "-":
        return sys.stdin.buffer.read()
    return Path(file_arg).read_bytes()
