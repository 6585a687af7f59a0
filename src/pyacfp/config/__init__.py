# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 01:58:20
# @Author : Kariko Lin

from .errors import (
    ConfigError,
    ConfigParseError,
    MalformedLineError,
    UnterminatedQuoteError,
    ConversionError,
    InvalidValueError,
    NotABooleanError,
    ValueOutOfRangeError,
    UnsupportedKindError
)
from .model import ConfigTable, SectionGroup, Section
from .parser import (
    ConfigParser,
    ConfigFileParser,
    parse_lines,
    parse_string,
    parse_file
)
from .primitives import parse, parse_or_none
