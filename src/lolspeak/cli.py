"""
Command line interface for the lolspeak translator.

Usage:
    lolspeak translate story.txt
    lolspeak translate page.xml --xml --heuristics -o page.lol.xml
    lolspeak sort-dictionary tranzlator.yml -o tranzlator.yml
    lolspeak reference -o LOLspeak.xml
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import LolspeakConfig, load_config
from .dictionary import load_dictionary, sort_dictionary_file
from .exceptions import LolspeakError
from .reference import build_reference
from .tranzlator import BUNDLED_DICTIONARY, Tranzlator

logger = logging.getLogger("lolspeak")


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _write_output(text: str, path: Path | None) -> None:
    if path is None:
        sys.stdout.write(text)
    else:
        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {path}")


def _translate(args: argparse.Namespace, config: LolspeakConfig) -> int:
    config = config.model_copy(update={
        "dictionary_path": args.dictionary or config.dictionary_path,
        "try_heuristics": args.heuristics or config.try_heuristics,
        "trace": args.trace or args.report or config.trace,
        "heuristics_exclude": config.heuristics_exclude | {word.lower() for word in args.exclude},
    })
    tranzlator = Tranzlator.from_config(config)
    word_filter = str.upper if args.upcase else None

    text = _read_input(args.file)
    if args.xml:
        translated = tranzlator.translate_xml_string(text, word_filter)
    else:
        translated = tranzlator.translate_words(text, word_filter)
    _write_output(translated, args.output)

    if args.report:
        sys.stderr.write(tranzlator.report().model_dump_json(indent=2) + "\n")
    return 0


def _sort_dictionary(args: argparse.Namespace, config: LolspeakConfig) -> int:
    source = args.dictionary or config.dictionary_path or BUNDLED_DICTIONARY
    text = sort_dictionary_file(source)
    _write_output(text, args.output)
    return 0


def _reference(args: argparse.Namespace, config: LolspeakConfig) -> int:
    source = args.dictionary or config.dictionary_path or BUNDLED_DICTIONARY
    _write_output(build_reference(load_dictionary(source)), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per tool."""
    parser = argparse.ArgumentParser(
        prog="lolspeak",
        description="Translate English into LOLspeak",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  LOLSPEAK_DICTIONARY, LOLSPEAK_HEURISTICS, LOLSPEAK_TRACE,
  LOLSPEAK_HEURISTICS_EXCLUDE and LOLSPEAK_LOG_LEVEL provide defaults
  (also read from a .env file).
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate = subparsers.add_parser("translate", help="Translate a text or XML file")
    translate.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="File to translate (default: standard input)"
    )
    translate.add_argument("-o", "--output", type=Path, help="Output file (default: standard output)")
    translate.add_argument(
        "--xml",
        action="store_true",
        help="Treat the input as XML and translate only its text"
    )
    translate.add_argument(
        "--heuristics",
        action="store_true",
        help="Translate unknown words with heuristic rules"
    )
    translate.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="WORD",
        help="Never apply heuristics to WORD (repeatable)"
    )
    translate.add_argument("--trace", action="store_true", help="Record dictionary-resolved words")
    translate.add_argument(
        "--report",
        action="store_true",
        help="Print traced and heuristic words as JSON on standard error (implies --trace)"
    )
    translate.add_argument("--upcase", action="store_true", help="Upper case every translated word")
    translate.add_argument("--dictionary", type=Path, help="YAML dictionary to use")
    translate.set_defaults(handler=_translate)

    sort = subparsers.add_parser("sort-dictionary", help="Print a dictionary sorted and minimally quoted")
    sort.add_argument("dictionary", nargs="?", type=Path, help="Dictionary file (default: bundled)")
    sort.add_argument("-o", "--output", type=Path, help="Output file (default: standard output)")
    sort.set_defaults(handler=_sort_dictionary)

    reference = subparsers.add_parser("reference", help="Generate an Apple Dictionary source document")
    reference.add_argument("dictionary", nargs="?", type=Path, help="Dictionary file (default: bundled)")
    reference.add_argument("-o", "--output", type=Path, help="Output file (default: standard output)")
    reference.set_defaults(handler=_reference)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the lolspeak command."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ValidationError as e:
        print(f"lolspeak: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.log_level)

    try:
        return args.handler(args, config)
    except (LolspeakError, OSError) as e:
        print(f"lolspeak: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
