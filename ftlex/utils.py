"""Text helpers for scanning lexer specification files."""

from __future__ import annotations

from itertools import takewhile
from pathlib import Path

__all__ = [
    "read_file",
    "find_first_occurrence",
    "find_first_occurrence_spaces",
    "replace_string_with_character",
    "find_char",
    "is_closing_quote",
    "is_new_part",
]


def read_file(path: str | Path) -> str:
    """Return the whole content of the file at ``path``, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _matched(text: str, pos: int, pattern: str) -> int:
    """Number of leading characters of ``pattern`` that match ``text`` at ``pos``."""
    pairs = zip(text[pos:], pattern)
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], pairs))


def find_first_occurrence(text: str, pattern: str) -> int:
    """Return the search index of the first occurrence of ``pattern``, or -1.

    The index advances by the length of every partial match, so for patterns
    longer than two characters it can run ahead of the real position.
    """
    index = 0
    for pos in range(len(text)):
        matched = _matched(text, pos, pattern)
        if matched == len(pattern):
            return index
        index += matched or 1
    return -1


def find_first_occurrence_spaces(text: str, pattern: str, last_char: str) -> int:
    """Like :func:`find_first_occurrence`, but the match must be followed by
    optional spaces and then ``last_char``."""
    index = 0
    for pos in range(len(text)):
        matched = _matched(text, pos, pattern)
        if matched == len(pattern) and last_char:
            after = text[pos + matched:]
            if after[:1] == last_char or after.lstrip(" ")[:1] == last_char:
                return index
        index += matched or 1
    return -1


def replace_string_with_character(
    text: str, replace_string: str, start: int, character: str
) -> str:
    """Overwrite ``len(replace_string)`` characters from ``start`` with ``character``.

    The replacement stops at the end of ``text``.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    count = min(len(replace_string), max(len(text) - start, 0))
    return text[:start] + character * count + text[start + count:]


def find_char(text: str, to_find: str, start: int, end: int) -> int:
    """Return the position of ``to_find`` from ``start`` on.

    The search stops at ``end`` (unless it is -1) or at the end of the text,
    whose position is then returned.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    for pos in range(start, len(text)):
        if end != -1 and pos == end:
            return pos
        if text[pos] == to_find:
            return pos
    return max(start, len(text))


def is_closing_quote(text: str, start: int, quote: str) -> bool:
    """Tell whether a ``quote`` follows ``start`` before any backslash."""
    if start < 0 or start >= len(text):
        return False
    previous = text[start - 1] if start > 0 else ""
    if previous != quote and text[start] == quote and start + 1 < len(text):
        start += 1
    for char in text[start:]:
        if char == quote:
            return True
        if char == "\\":
            break
    return False


def is_new_part(text: str, occurrence: int) -> int:
    """Return ``occurrence`` unless the next double quote sits right before
    the next closing parenthesis, in which case return -1."""
    right_dquote = find_char(text, '"', occurrence, -1)
    right_paren = find_char(text, ")", occurrence, -1)
    if right_dquote != right_paren - 1:
        return occurrence
    return -1