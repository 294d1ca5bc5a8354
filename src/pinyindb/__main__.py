#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import first_letters, init_database, pinyin
from .config import PinyinConfig
from .core.formatter import ToneRepresentation
from .errors import PinyinDataError
from .resource import build_resource

_LOGGER = logging.getLogger("pinyindb")


def _tone_repr(value: str) -> ToneRepresentation:
    try:
        return ToneRepresentation.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pinyindb")
    parser.add_argument(
        "--resource", help="Path to pinyin data file (default: bundled data)"
    )
    parser.add_argument(
        "--no-polyphone",
        action="store_true",
        help="Keep only the default reading of each character",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Print DEBUG messages to console"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    pinyin_parser = subparsers.add_parser("pinyin", help="Convert text to pinyin")
    pinyin_parser.add_argument("text", help="Text to convert")
    pinyin_parser.add_argument(
        "-t",
        "--tone-repr",
        "--tone_repr",
        type=_tone_repr,
        default=ToneRepresentation.UNICODE,
        help="Tone representation: Unicode (default), Numbered or None",
    )

    letters_parser = subparsers.add_parser(
        "first-letters", help="Replace characters with their first letter"
    )
    letters_parser.add_argument("text", help="Text to convert")

    serve_parser = subparsers.add_parser("serve", help="Run HTTP server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="HTTP server host")
    serve_parser.add_argument("--port", type=int, default=3030, help="HTTP server port")

    build_parser = subparsers.add_parser(
        "build-resource", help="Regenerate pinyin data file from pypinyin"
    )
    build_parser.add_argument(
        "output", nargs="?", help="Output path (default: overwrite bundled data)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    _LOGGER.debug(args)

    if args.command == "build-resource":
        report = build_resource(args.output)
        print(
            f"{report.records} records, {len(report.truncated)} truncated, "
            f"{len(report.skipped)} skipped"
        )
        return 0

    config = PinyinConfig(
        resource_path=Path(args.resource) if args.resource else None,
        polyphone=not args.no_polyphone,
    )
    try:
        database = init_database(config)
    except PinyinDataError as exc:
        _LOGGER.error("failed to load pinyin data: %s", exc)
        return 1

    if args.command == "pinyin":
        print(pinyin(args.text, args.tone_repr, database=database))
    elif args.command == "first-letters":
        print(first_letters(args.text, database=database))
    elif args.command == "serve":
        from .server import create_app

        app = create_app(database)
        app.run(host=args.host, port=args.port)

    return 0


if __name__ == "__main__":
    sys.exit(main())
