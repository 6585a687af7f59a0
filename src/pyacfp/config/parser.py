# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 01:35:44
# @Author : Kariko Lin

"""Build a `ConfigTable` from config lines.

Each line is one of:

    ```ini
    # comment, or // comment
    [section]              # or [section subsection], names may be "quoted"
    key = value            # key and value may be "quoted" too
    ```

Any malformed line aborts the whole parse, no partial table is returned.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from typing import Iterable

from chardet import detect as guess_codec

from ..abstract import FileHandler
from .consts import (
    CODEC_CONFIDENCE,
    DEFAULT_CODEC,
    FALLBACK_CODEC,
    NOT_FOUND,
    SECTION_PAIR,
    SUBSECTION_SEP
)
from .errors import MalformedLineError
from .lexer import find_eq, find_unquoted, strip_comment, strip_quotes, trim
from .model import ConfigTable, Section


def _read_header(
    table: ConfigTable, line: str, lineno: int
) -> Section:
    line = strip_quotes(line, lineno, *SECTION_PAIR)
    sep = find_unquoted(line, SUBSECTION_SEP)
    if sep == NOT_FOUND:
        section = strip_quotes(trim(line), lineno)
        subsection = ''
    else:
        section = strip_quotes(trim(line[:sep]), lineno)
        subsection = strip_quotes(trim(line[sep + 1:]), lineno)
    logging.debug(f'line {lineno}: entering [{section}] "{subsection}"')
    return table.setdefault(section).setdefault(subsection)


def _read_pair(cursor: Section, line: str, lineno: int) -> None:
    eq = find_eq(line)
    if eq == NOT_FOUND:
        raise MalformedLineError(lineno, line)
    key = strip_quotes(trim(line[:eq]), lineno)
    value = strip_quotes(trim(line[eq + 1:]), lineno)
    cursor.set_field(key, value)


def parse_lines(lines: Iterable[str]) -> ConfigTable:
    """Parse decoded config lines (trailing newlines allowed).

    Raises:
        MalformedLineError: a non-header line without an unquoted `=`.
        UnterminatedQuoteError: a quote (or `[`) never closed.
    """
    ret = ConfigTable()
    cursor = ret.setdefault('').setdefault('')
    lineno = 0
    for lineno, raw in enumerate(lines, 1):
        line = trim(strip_comment(trim(raw.rstrip('\r\n'))))
        if not line:
            continue
        if line[0] == SECTION_PAIR[0]:
            cursor = _read_header(ret, line, lineno)
        else:
            _read_pair(cursor, line, lineno)
    logging.debug(f'{lineno} line(s) parsed into {len(ret)} section(s).')
    return ret


def parse_string(text: str) -> ConfigTable:
    # split on `\n` only, just like reading a stream.
    return parse_lines(StringIO(text))


class ConfigParser:
    @staticmethod
    def readstream(buf: TextIOBase) -> ConfigTable:
        """读取解码好的字符串流。

        Read line by line until EOF. I/O errors are not caught.
        """
        return parse_lines(iter(buf.readline, ''))

    @staticmethod
    def readstring(text: str) -> ConfigTable:
        return parse_string(text)


class ConfigFileParser(ConfigParser, FileHandler[ConfigTable]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        encoding = codec.get('encoding')
        if encoding is None or codec['confidence'] < CODEC_CONFIDENCE:
            logging.warning(
                f'Unsure about the encoding of "{filename}" ({codec}), '
                f'assuming {DEFAULT_CODEC}.')
            encoding = DEFAULT_CODEC

        # fallbacks
        try:
            buf = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode(FALLBACK_CODEC)
        return StringIO(buf)

    def read(self) -> ConfigTable:
        """读取`ConfigFileParser`实例指定的文件。

        `OSError` (missing file, no permission, ...) is passed through.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.info(f'Failed to decode "{self._fn}" as {self._codec}, '
                         'guessing with chardet.')
            return self.readstream(self._decode_file(self._fn))

    def __str__(self) -> str:
        return "Config file: " + super().__str__() + f"({self._codec})"


def parse_file(
    filename: str | PathLike[str], encoding: str | None = None
) -> ConfigTable:
    return ConfigFileParser(filename, encoding).read()
