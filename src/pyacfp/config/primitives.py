# -*- encoding: utf-8 -*-
# @File   : primitives.py
# @Time   : 2024/11/02 22:10:05
# @Author : Kariko Lin

"""Scalar conversions used by typed field lookups.

Supported kinds are a closed set:

- `bool` (or `ctypes.c_bool`), judged by the first character only.
- `int`, meaning a C `int` (32-bit signed), or any ctypes integer type,
like `c_uint8` or `c_int64`.
- `float` (`c_double`), `c_float` or `c_longdouble` (as a double).

The whole text has to be consumed, e.g. `'12px'` is NOT `12`.
"""

import ctypes
import math
from re import IGNORECASE
from re import compile as regex
from struct import pack, unpack
from typing import Any, TypeVar

from .errors import (
    ConversionError,
    InvalidValueError,
    NotABooleanError,
    UnsupportedKindError,
    ValueOutOfRangeError
)

T = TypeVar('T')

_FALSY = frozenset('0fn')
_TRUTHY = frozenset('1ty')

_INT_TEXT = regex(r'-?[0-9]+')
_FLOAT_TEXT = regex(
    r'-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)',
    IGNORECASE)
_FLOAT_NONZERO = regex(r'[1-9]')

_BOOL_KINDS = (bool, ctypes.c_bool)
_INT_KINDS: tuple[type, ...] = (
    ctypes.c_byte, ctypes.c_ubyte,
    ctypes.c_short, ctypes.c_ushort,
    ctypes.c_int, ctypes.c_uint,
    ctypes.c_long, ctypes.c_ulong,
    ctypes.c_longlong, ctypes.c_ulonglong,
    ctypes.c_int8, ctypes.c_uint8,
    ctypes.c_int16, ctypes.c_uint16,
    ctypes.c_int32, ctypes.c_uint32,
    ctypes.c_int64, ctypes.c_uint64,
    ctypes.c_size_t, ctypes.c_ssize_t,
)
_FLOAT_KINDS = frozenset({
    float, ctypes.c_double, ctypes.c_longdouble, ctypes.c_float,
})


def int_bounds(kind: type) -> tuple[int, int]:
    """Inclusive `(min, max)` of an integer kind."""
    if kind is int:
        kind = ctypes.c_int32
    bits = ctypes.sizeof(kind) * 8
    if kind(-1).value < 0:  # signed
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def parse_bool(text: str) -> bool:
    if text:
        if text[0].lower() in _FALSY:
            return False
        if text[0].lower() in _TRUTHY:
            return True
    raise NotABooleanError(text)


def parse_int(text: str, kind: type = int) -> int:
    if not _INT_TEXT.fullmatch(text):
        raise InvalidValueError(text, kind)
    lo, hi = int_bounds(kind)
    if lo == 0 and text.startswith('-'):
        # unsigned kinds do not accept a sign at all.
        raise InvalidValueError(text, kind)
    try:
        ret = int(text)
    except ValueError as e:
        raise ConversionError(text, kind) from e
    if not lo <= ret <= hi:
        raise ValueOutOfRangeError(text, kind)
    return ret


def parse_float(text: str, kind: type = float) -> float:
    if not _FLOAT_TEXT.fullmatch(text):
        raise InvalidValueError(text, kind)
    try:
        ret = float(text)
    except ValueError as e:
        raise ConversionError(text, kind) from e
    if math.isnan(ret) or text.lstrip('-')[0] in 'iI':
        return ret

    if math.isinf(ret):
        raise ValueOutOfRangeError(text, kind)
    if kind is ctypes.c_float:
        # round to the nearest float32.
        try:
            ret = unpack('<f', pack('<f', ret))[0]
        except OverflowError as e:
            raise ValueOutOfRangeError(text, kind) from e
    mantissa = text.lower().split('e')[0]
    if ret == 0.0 and _FLOAT_NONZERO.search(mantissa):
        # underflow, like '1e-400'.
        raise ValueOutOfRangeError(text, kind)
    return ret


def parse(text: str, kind: type[T] | Any) -> T:
    """Convert `text` as `kind`.

    Raises:
        - `NotABooleanError` / `InvalidValueError`: malformed text.
        - `ValueOutOfRangeError`: fine text, but too large (or small).
        - `UnsupportedKindError`: `kind` is not a supported type.
        - `ConversionError`: anything else.
    """
    if kind in _BOOL_KINDS:
        return parse_bool(text)
    if kind is int or kind in _INT_KINDS:
        return parse_int(text, kind)
    if kind in _FLOAT_KINDS:
        return parse_float(text, kind)
    raise UnsupportedKindError(text, kind)


def parse_or_none(text: str | None, kind: type[T] | Any) -> T | None:
    """Same as `parse()`, but absence (`None`) stays absent."""
    if text is None:
        return None
    return parse(text, kind)
