# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 02:04:11
# @Author : Kariko Lin

import logging

from .config import (
    ConfigTable, SectionGroup, Section,
    ConfigParser, ConfigFileParser,
    parse_lines, parse_string, parse_file,
    parse, parse_or_none,
    ConfigError, ConfigParseError, ConversionError
)

__all__ = [
    'ConfigTable', 'SectionGroup', 'Section',
    'ConfigParser', 'ConfigFileParser',
    'parse_lines', 'parse_string', 'parse_file',
    'parse', 'parse_or_none',
    'ConfigError', 'ConfigParseError', 'ConversionError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
