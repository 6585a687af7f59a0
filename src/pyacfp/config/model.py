# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/03 00:12:26
# @Author : Kariko Lin

"""
Three level config table: section -> subsection -> field.

```ini
key = val          # table[''][''], fields before any header.

[server]
host = localhost    # table['server']['']
[server main]
name = "my server"  # table['server']['main']
```

Looking up missing names never fails. An empty group (or section) is
returned instead, so `table['x']['y']['z']` is simply `None`.
Only type conversion of a PRESENT value may raise.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterator, TypeVar

from .lexer import trim
from .primitives import parse_or_none

T = TypeVar('T')


class Section(Mapping[str, str]):
    """Fields of a (sub)section. All values are raw `str`,
    they get typed only on reading, see `get_field_as()`.

    Unlike a plain `Mapping`, `section[key]` gives `None` for a
    missing key instead of raising `KeyError`. Iteration and `in`
    only ever see stored keys, so values are always `str`.
    """

    def __init__(self, name: str = '') -> None:
        self._name = name
        self.__fields: dict[str, str] = {}

    def __getitem__(self, key: str) -> str | None:
        return self.__fields.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__fields

    def __len__(self) -> int:
        return len(self.__fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__fields)

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__fields))

    @property
    def name(self) -> str:
        return self._name

    def has_field(self, key: str) -> bool:
        return key in self.__fields

    def get_field(self, key: str) -> str | None:
        return self.__fields.get(key)

    def get_field_as(self, key: str, kind: type[T] | Any) -> T | None:
        """Read a field as `kind` (`bool`, `int`, `float`, or a ctypes type).

        `None` if the field is absent. Conversion errors are NOT swallowed.
        """
        return parse_or_none(self.get_field(key), kind)

    def set_field(self, key: str, value: str) -> None:
        # for the builder. treat parsed tables as read only.
        if key in self.__fields:
            logging.debug(
                f'{self!r}: "{key}" overridden, '
                f'"{self.__fields[key]}" -> "{value}"')
        self.__fields[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.__fields.get(key, default)

    # lazy wrappers, just like `get_field_as()` with a fallback.
    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        ret = self.get_field_as(key, bool)
        return default if ret is None else ret

    def get_int(
        self, key: str, default: int | None = None, kind: type = int
    ) -> int | None:
        ret = self.get_field_as(key, kind)
        return default if ret is None else ret

    def get_float(
        self, key: str, default: float | None = None, kind: type = float
    ) -> float | None:
        ret = self.get_field_as(key, kind)
        return default if ret is None else ret

    def get_list(self, key: str, sep: str = ',') -> tuple[str, ...]:
        """Split a value like `a, b,c` into `('a', 'b', 'c')`.

        Items are trimmed of spaces and tabs like any other value.
        Empty items are dropped, an absent field gives `()`.
        """
        if (val := self.get_field(key)) is None:
            return ()
        return tuple(j for i in val.split(sep) if (j := trim(i)))

    def to_dict(self) -> dict[str, str]:
        return self.__fields.copy()


class SectionGroup(Mapping[str, Section]):
    """All subsections sharing one section name.
    The subsection `''` holds fields of a bare `[section]`."""

    def __init__(self, name: str = '') -> None:
        self._name = name
        self.__sections: dict[str, Section] = {}

    def __getitem__(self, subkey: str) -> Section:
        return self.get_subsection(subkey)

    def __contains__(self, subkey: object) -> bool:
        return subkey in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '[%s] { .subsections = %s }' % (
            self._name, list(self.__sections))

    @property
    def name(self) -> str:
        return self._name

    def has_subsection(self, subkey: str) -> bool:
        return subkey in self.__sections

    def get_subsection(self, subkey: str) -> Section:
        """Never fails, a new empty `Section` for missing ones."""
        if subkey not in self.__sections:
            return Section(self.__fullname(subkey))
        return self.__sections[subkey]

    def get(self, subkey: str, default: Any = None) -> Any:
        return self.__sections.get(subkey, default)

    def setdefault(self, subkey: str) -> Section:
        """Get the subsection, creating it if needed. For the builder."""
        if subkey not in self.__sections:
            self.__sections[subkey] = Section(self.__fullname(subkey))
        return self.__sections[subkey]

    def __fullname(self, subkey: str) -> str:
        return f'{self._name} {subkey}' if subkey else self._name

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}


class ConfigTable(Mapping[str, SectionGroup]):
    """A whole parsed config. Build it with `parser.parse_lines()`
    (or friends) rather than by hand."""

    def __init__(self) -> None:
        self.__groups: dict[str, SectionGroup] = {}

    def __getitem__(self, key: str) -> SectionGroup:
        return self.get_section(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__groups

    def __len__(self) -> int:
        return len(self.__groups)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__groups)

    def __repr__(self) -> str:
        return f'ConfigTable({list(self.__groups)})'

    @property
    def header(self) -> Section:
        """Fields appearing before any section header."""
        return self.get_section('').get_subsection('')

    def has_section(self, key: str) -> bool:
        return key in self.__groups

    def get_section(self, key: str) -> SectionGroup:
        """Never fails, a new empty `SectionGroup` for missing ones."""
        if key not in self.__groups:
            return SectionGroup(key)
        return self.__groups[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.__groups.get(key, default)

    def setdefault(self, key: str) -> SectionGroup:
        """Get the section, creating it if needed. For the builder."""
        if key not in self.__groups:
            self.__groups[key] = SectionGroup(key)
        return self.__groups[key]

    def find_field(
        self, section: str, key: str, subsection: str = ''
    ) -> str | None:
        return self[section][subsection][key]

    def to_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        return {k: v.to_dict() for k, v in self.__groups.items()}
