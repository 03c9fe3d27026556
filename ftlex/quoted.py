"""Extraction of double-quoted strings from a specification."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LexerString", "LexerStringError", "get_string", "create_lexer_strings"]

_NEWLINE_MESSAGE = (
    "One or more strings are invalid. "
    "Newlines or linebreaks are not allowed in a string"
)
_UNCLOSED_MESSAGE = "String has no closing quote"


class LexerStringError(ValueError):
    """Raised when a quoted string is malformed."""


@dataclass(frozen=True)
class LexerString:
    """A quoted string: ``start`` is its opening quote, ``end`` follows its closing one."""

    start: int
    end: int
    content: str


def get_string(text: str, start: int) -> tuple[str, int]:
    """Read the string whose opening quote is at ``start``.

    Return its content, escape sequences kept as written, and the offset
    just past the closing quote.
    """
    pos = start + 1
    first = pos
    found = False
    while pos < len(text):
        char = text[pos]
        if char == "\n":
            raise LexerStringError(_NEWLINE_MESSAGE)
        if char == '"':
            if text[pos - 1] != "\\":
                found = True
                break
            before = text[1:pos]
            unescaped = before.rstrip("\\")
            if unescaped:
                found = True
            if (len(before) - len(unescaped)) % 2 == 0:
                found = True
                break
        pos += 1
    if not found:
        raise LexerStringError(_UNCLOSED_MESSAGE)
    return text[first:pos], pos + 1


def create_lexer_strings(text: str) -> list[LexerString]:
    """Collect every double-quoted string of ``text`` in order.

    A quote preceded by a backslash does not open a string, and the
    character right after a closing quote is not examined.
    """
    strings: list[LexerString] = []
    pos = 0
    while pos < len(text):
        if text[pos] != '"' or (pos > 0 and text[pos - 1] == "\\"):
            pos += 1
            continue
        content, end = get_string(text, pos)
        strings.append(LexerString(start=pos, end=end, content=content))
        pos = end + 1
    return strings