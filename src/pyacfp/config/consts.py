# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:40:12
# @Author : Kariko Lin

from enum import Enum

DEFAULT_TRIM_CHARS = ' \t'
ESCAPE_CHAR = '\\'
SUBSECTION_SEP = ' '
KEY_VALUE_SEP = '='

# (open, close)
QUOTE_PAIR = ('"', '"')
SECTION_PAIR = ('[', ']')

# returned by the lexer when a char is never found unquoted.
NOT_FOUND = -1

# file reading, see `ConfigFileParser`.
CODEC_CONFIDENCE = 0.8
DEFAULT_CODEC = 'utf-8'
FALLBACK_CODEC = 'latin-1'  # never fails to decode


class CommentMark(str, Enum):
    HASH = '#'
    SLASHES = '//'


COMMENT_MARKS = tuple(i.value for i in CommentMark)
