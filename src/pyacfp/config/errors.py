# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:52:37
# @Author : Kariko Lin

"""Errors raised while parsing, or reading typed values.

Parse-time errors (`ConfigParseError`) abort the whole parse,
while conversion errors only concern a single typed lookup.
"""


class ConfigError(Exception):
    """Base of everything this package raises on purpose."""
    pass


class ConfigParseError(ConfigError):
    """A line could not be understood. No table is produced."""
    reason = 'Unparsable line'

    def __init__(self, lineno: int, text: str) -> None:
        super().__init__(f"{self.reason} on line {lineno}: '{text}'")
        self.lineno = lineno
        self.text = text


class MalformedLineError(ConfigParseError):
    """Key/value line without an unquoted `=`."""
    reason = 'Malformed line'


class UnterminatedQuoteError(ConfigParseError):
    """Opening quote (or `[`) without the matching close."""
    reason = 'Unfinished quoted string'


class ConversionError(ConfigError):
    """A stored value could not be read as the requested kind."""

    def __init__(self, text: str, kind: object, message: str | None = None):
        name = getattr(kind, '__name__', repr(kind))
        super().__init__(
            message or f"Unknown error while parsing '{text}' as a {name}")
        self.text = text
        self.kind = kind


class InvalidValueError(ConversionError, ValueError):
    def __init__(self, text: str, kind: object) -> None:
        name = getattr(kind, '__name__', repr(kind))
        super().__init__(text, kind, f"String '{text}' is not a valid {name}")


class NotABooleanError(InvalidValueError):
    def __init__(self, text: str, kind: object = bool) -> None:
        ConversionError.__init__(
            self, text, kind, f"Could not parse '{text}' as bool")


class ValueOutOfRangeError(ConversionError, OverflowError):
    def __init__(self, text: str, kind: object) -> None:
        name = getattr(kind, '__name__', repr(kind))
        super().__init__(
            text, kind, f"String '{text}' not representable in type {name}")


class UnsupportedKindError(ConversionError, TypeError):
    def __init__(self, text: str, kind: object) -> None:
        super().__init__(
            text, kind, f'Cannot convert values to {kind!r}')
