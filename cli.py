import argparse
import sys
from pathlib import Path

from api.config import DEFAULT_LANGUAGE
from api.models import AnswerOptionParams
from api.services import editor_service
from api.utils import json_dump, json_load
from logging_setup import setup_console_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert answer options between editor text and JSON"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Editor text file -> options JSON")
    parse_cmd.add_argument("file", type=Path, help="Text file, question on line 1")

    serialize_cmd = sub.add_parser("serialize", help="Options JSON -> editor text")
    serialize_cmd.add_argument(
        "file", type=Path, help='JSON file with "question" and "options"'
    )

    help_cmd = sub.add_parser("help", help="Print the editor help text")
    help_cmd.add_argument("--lang", default=DEFAULT_LANGUAGE, help="Language code")

    for cmd in (parse_cmd, serialize_cmd, help_cmd):
        cmd.add_argument(
            "--output",
            type=Path,
            default=None,
            help="Write result to file instead of stdout",
        )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    if args.command == "parse":
        text = args.file.read_text(encoding="utf-8")
        question, options = editor_service.parse_document(text)
        return json_dump(
            {
                "question": question,
                "options": [option.to_params() for option in options],
            }
        )
    if args.command == "serialize":
        payload = json_load(args.file.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise SystemExit("Expected a JSON object with question and options")
        options = [
            AnswerOptionParams.model_validate(option).to_option()
            for option in payload.get("options", [])
        ]
        return editor_service.serialize_document(
            str(payload.get("question", "")), options
        )
    strings = editor_service.editor_strings(args.lang)
    return str(strings["helpText"])


def main(argv: list[str] | None = None) -> None:
    setup_console_logging()
    args = parse_args(argv)
    result = run(args)
    if args.output is not None:
        args.output.write_text(result, encoding="utf-8")
        print(f"Saved result to {args.output}")
    else:
        sys.stdout.write(result + "\n")


if __name__ == "__main__":
    main()
