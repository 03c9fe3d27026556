"""Splitting a lexer specification into its three sections."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import find_first_occurrence_spaces

__all__ = ["LexerPart", "LexerParts", "get_lexer_part", "split_in_parts"]

SEPARATOR = "%%"
_SEPARATOR_LINE = SEPARATOR + "\n"


@dataclass(frozen=True)
class LexerPart:
    """One section of a specification.

    ``end`` is the offset in the scanned text where the following section starts.
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class LexerParts:
    """The definitions, rules and user code sections."""

    header: LexerPart
    body: LexerPart
    footer: LexerPart


def get_lexer_part(text: str) -> LexerPart:
    """Cut the section that runs up to the first ``%%`` line of ``text``.

    Without a separator the section is empty.
    """
    occurrence = find_first_occurrence_spaces(text, SEPARATOR, "\n")
    if occurrence == -1:
        occurrence = 0
    return LexerPart(
        text=text[:occurrence],
        start=0,
        end=occurrence + len(_SEPARATOR_LINE),
    )


def split_in_parts(text: str) -> LexerParts:
    """Split ``text`` into header, body and footer sections."""
    header = get_lexer_part(text)
    rest = text[header.end:]
    body = get_lexer_part(rest)
    rest = rest[body.end:]
    footer = get_lexer_part(rest)
    return LexerParts(header=header, body=body, footer=footer)