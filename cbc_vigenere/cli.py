"""
Command line: cbc-vigenere <file> <keyword> <iv>
=================================================
Validates the arguments, loads and cleans the plaintext file, encrypts
it and prints the report. Any validation or I/O error is written to
stderr and nothing is encrypted.

Exit status: 0 on success, 1 on any reported error.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .engine import encrypt
from .errors import CBCVigenereError, UsageError
from .report import format_error, format_report
from .validation import load_message, validate_arguments

logger = logging.getLogger(__name__)

PROG = "cbc-vigenere"


class _Parser(argparse.ArgumentParser):
    """argparse exits on bad syntax; we want our own UsageError instead."""

    def error(self, message):
        logger.debug("argparse: %s", message)
        raise UsageError(self.prog)


def build_parser() -> argparse.ArgumentParser:
    """Parser for the leading options only; positionals never reach argparse."""
    parser = _Parser(
        prog=PROG,
        usage="%(prog)s [-v] [--] file keyword iv",
        description="Encrypt a text file with the Vigenère cipher in CBC mode. "
                    "Keyword and IV are alphabetic and of equal length (max 10).",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log progress to stderr")
    return parser


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Split argv into (options, positionals).

    Options are only recognised before the first plain token or a `--`.
    Everything after that is positional, so a keyword such as "-ab" is
    validated like any other keyword.
    """
    argv = list(argv)
    for i, token in enumerate(argv):
        if token == "--":
            return argv[:i], argv[i + 1:]
        if not token.startswith("-") or token == "-":
            return argv[:i], argv[i:]
    return argv, []


def run(args: Sequence[str]) -> str:
    """Validate, load, encrypt and return the formatted report."""
    source, key, iv = validate_arguments(args, PROG)
    message = load_message(source)
    result  = encrypt(message, key, iv)
    return format_report(source, message, key, iv, result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    options, args = split_argv(argv)
    try:
        ns = build_parser().parse_args(options)
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger(__package__).setLevel(
            logging.DEBUG if ns.verbose else logging.WARNING)
        report = run(args)
    except CBCVigenereError as e:
        logger.debug("aborted: %s", e)
        sys.stderr.write(format_error(e))
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
