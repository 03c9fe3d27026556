"""Command that lists the quoted strings of a lexer specification."""

from __future__ import annotations

import argparse
import sys

from .quoted import LexerStringError, create_lexer_strings
from .utils import read_file

__all__ = ["main"]

DEFAULT_PATH = "files/ex1.l"


def main(argv: list[str] | None = None) -> int:
    """Print every quoted string of the given file, one per line."""
    parser = argparse.ArgumentParser(
        prog="ftlex", description="List the quoted strings of a lexer specification."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        text = read_file(args.path)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        strings = create_lexer_strings(text)
    except LexerStringError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for item in strings:
        print(item.content)
    return 0


if __name__ == "__main__":
    sys.exit(main())