"""Command-line interface for siphon.

WHY: Most conversions are one-offs typed in a terminal or run from a
build script that assembles a LaTeX document, so the converter needs a
small command with the format and wrapper as flags and the result on
stdout.

HOW: argparse collects the input words, the format (any name or alias),
the LaTeX wrapper and a debug flag; defaults come from siphon.config.
A Converter does the work. Errors are reported on stderr.

RULES:
- Positional INPUT words are joined with single spaces
- A single "-" as input reads the text from stdin
- Words starting with "-" must follow "--" (siphon -- -ni3)
- Output goes to stdout, followed by a newline
- Debug dumps (arguments, tokens) and log records go to stderr
- Exit codes: 0 = success, 1 = conversion error, 2 = usage error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from siphon import __version__
from siphon.config import (
    DEFAULT_DEBUG,
    DEFAULT_FORMAT,
    DEFAULT_LATEX_WRAPPER,
    LOG_FORMAT,
)
from siphon.converter import Converter
from siphon.errors import SiphonError
from siphon.formats import FORMAT_ALIASES, Format


def _status(msg: str) -> None:
    """Print a diagnostic message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _parse_format(value: str) -> Format:
    try:
        return Format.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _format_help() -> str:
    lines = []
    for fmt in Format:
        aliases = [name for name, target in FORMAT_ALIASES.items()
                   if target is fmt and name != fmt.value]
        lines.append("{} ({})".format(fmt.value, ", ".join(aliases)))
    return "; ".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser directly.
    """
    parser = argparse.ArgumentParser(
        prog="siphon",
        description="A CLI tool box for Chinese phonological conversion (SInoPHONe). "
                    "Converts numbered Pinyin into diacritic Pinyin or IPA.",
        epilog="For the vowel ü you can type 'v', the decomposed 'ü' (u + U+0308) "
               "or the precomposed 'ü'.",
    )

    parser.add_argument(
        "words",
        nargs="*",
        metavar="INPUT",
        help="Text in numbered Pinyin to convert, or '-' to read from stdin.",
    )

    parser.add_argument(
        "-f", "--format", "--toneformat", "--textformat",
        dest="fmt",
        type=_parse_format,
        default=DEFAULT_FORMAT,
        help="Transcription format of the output text (default: %(default)s). "
             "Formats: {}.".format(_format_help()),
    )

    parser.add_argument(
        "-r", "--wrap", "--wrapper", "--latex", "--latexwrapper", "--latex-wrapper",
        dest="latex_wrapper",
        default=DEFAULT_LATEX_WRAPPER,
        help="LaTeX command name wrapped around tone numbers in the LaTeX "
             "formats; only the command name is replaced (default: %(default)s).",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=DEFAULT_DEBUG,
        help="Print debug info to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``siphon`` and ``python -m siphon``.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    words = sys.stdin.read().split() if args.words == ["-"] else list(args.words)
    converter = Converter(
        fmt=args.fmt,
        latex_wrapper=args.latex_wrapper,
        words=words,
        debug=args.debug,
    )

    try:
        tokens = converter.tokenize()
        if converter.debug:
            _status("[args]\n{!r}".format(converter))
            _status("[tokenized text]\n{!r}".format(tokens))
        output = converter.transform(tokens)
    except SiphonError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
