"""
Module: cli

Purpose:
    Command-line front end for the importer.

    qbank-import preview FILE [--rules RULES] [--json]
    qbank-import convert FILE -o OUT [--valid-only] [--rules RULES]
    qbank-import template {xlsx,docx} OUT

Exit codes: 0 success, 1 import/decode/validation failure, 2 usage error.

Dependencies:
    - argparse (std)
    - qbank_toolkit.importer: Parsing
    - qbank_toolkit.core.utils: JSON output

Used By:
    - run_import.py launcher
    - qbank-import console script
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from qbank_toolkit import __version__
from qbank_toolkit.common.rules import load_rules
from qbank_toolkit.core.schemas.validator import ValidationError
from qbank_toolkit.core.utils.serialization import write_questions_json
from qbank_toolkit.importer import (
    ImportConfig,
    QuestionImportError,
    format_preview,
    parse_question_path,
)
from qbank_toolkit.importer.templates import generate_excel_template, generate_word_template

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qbank-import",
        description="Import question banks from spreadsheets and Word documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Parse a file and show what would be imported")
    preview.add_argument("file", type=Path, help="Question bank (.xlsx, .xls, .docx, .doc)")
    preview.add_argument("--rules", type=Path, help="JSON file with extra synonyms/aliases")
    preview.add_argument("--json", action="store_true", help="Print the full result as JSON")

    convert = subparsers.add_parser("convert", help="Parse a file and write records as JSON")
    convert.add_argument("file", type=Path, help="Question bank (.xlsx, .xls, .docx, .doc)")
    convert.add_argument("-o", "--output", type=Path, required=True, help="Output .json or .jsonl file")
    convert.add_argument("--valid-only", action="store_true", help="Drop records without question text")
    convert.add_argument("--rules", type=Path, help="JSON file with extra synonyms/aliases")

    template = subparsers.add_parser("template", help="Write a fill-in template")
    template.add_argument("kind", choices=["xlsx", "docx"], help="Template format")
    template.add_argument("output", type=Path, help="Output file")

    return parser


def _config_from_args(args: argparse.Namespace) -> ImportConfig:
    if args.rules is None:
        return ImportConfig()
    return ImportConfig(rules=load_rules(args.rules))


def _cmd_preview(args: argparse.Namespace) -> int:
    result = parse_question_path(args.file, config=_config_from_args(args))
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_preview(result.questions))
        for warning in result.warnings:
            print(f"warning: {warning}")
    return EXIT_OK


def _cmd_convert(args: argparse.Namespace) -> int:
    result = parse_question_path(args.file, config=_config_from_args(args))
    questions = result.valid_questions if args.valid_only else result.questions
    write_questions_json(questions, args.output)
    print(f"Wrote {len(questions)} records to {args.output} ({result.stats.summary()})")
    return EXIT_OK


def _cmd_template(args: argparse.Namespace) -> int:
    data = generate_excel_template() if args.kind == "xlsx" else generate_word_template()
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(data)
    print(f"Wrote {args.kind} template to {args.output}")
    return EXIT_OK


_COMMANDS = {
    "preview": _cmd_preview,
    "convert": _cmd_convert,
    "template": _cmd_template,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits 0 for --help/--version and 2 for usage errors
        return exc.code if isinstance(exc.code, int) else EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.command](args)
    except (QuestionImportError, ValidationError, FileNotFoundError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
