# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2024/11/02 22:47:51
# @Author : Kariko Lin

"""Quote-aware scanning helpers for a single config line.

A backslash escapes the next character. The escape flag is toggled
by each backslash, so `\\\\` ends up unescaped and `\\\\\\` escaped.
Escape sequences are NOT decoded, values keep their backslashes.

NOTE: `find_unquoted()` respects quotes but `strip_comment()` does not.
`name = "a # b"` is read as `name = "a`, which then fails as an
unterminated quoted string.
"""

from .consts import (
    COMMENT_MARKS,
    DEFAULT_TRIM_CHARS,
    ESCAPE_CHAR,
    KEY_VALUE_SEP,
    NOT_FOUND,
    QUOTE_PAIR
)
from .errors import UnterminatedQuoteError


def trim(text: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    return text.strip(chars)


def is_escaped(text: str, index: int) -> bool:
    """Whether `text[index]` follows an odd run of backslashes."""
    escaped = False
    i = index - 1
    while i >= 0 and text[i] == ESCAPE_CHAR:
        escaped = not escaped
        i -= 1
    return escaped


def find_unquoted(text: str, ch: str) -> int:
    """Index of the first `ch` neither escaped nor between `"`s,
    or `NOT_FOUND`."""
    quoted = False
    escaped = False
    for i, c in enumerate(text):
        if c == ESCAPE_CHAR:
            escaped = not escaped
        elif escaped:
            escaped = False
        elif c == QUOTE_PAIR[0]:
            quoted = not quoted
        elif c == ch and not quoted:
            return i
    return NOT_FOUND


def find_eq(text: str) -> int:
    return find_unquoted(text, KEY_VALUE_SEP)


def strip_comment(text: str) -> str:
    """Cut `text` at the first unescaped `#` or `//`, quoted or not."""
    escaped = False
    for i, c in enumerate(text):
        if c == ESCAPE_CHAR:
            escaped = not escaped
        elif escaped:
            escaped = False
        elif text.startswith(COMMENT_MARKS, i):
            return text[:i]
    return text


def strip_quotes(
    text: str, lineno: int,
    front: str = QUOTE_PAIR[0], back: str = QUOTE_PAIR[1]
) -> str:
    """Remove one layer of `front`...`back` around `text`, if any.

    Raises:
        UnterminatedQuoteError: `text` opens with `front` but
            does not close with an unescaped `back`.
    """
    if not text.startswith(front):
        return text
    inner = text[len(front):]
    if not inner.endswith(back) or is_escaped(inner, len(inner) - len(back)):
        raise UnterminatedQuoteError(lineno, text)
    return inner[:len(inner) - len(back)]
