import ctypes
import logging

import pytest

from pyacfp.config.errors import InvalidValueError, ValueOutOfRangeError
from pyacfp.config.model import ConfigTable, Section, SectionGroup


def test_section_set_then_get() -> None:
    sect = Section()
    sect.set_field('host', 'localhost')
    assert sect.get_field('host') == 'localhost'
    assert sect['host'] == 'localhost'
    assert sect.has_field('host')
    assert 'host' in sect
    assert len(sect) == 1
    assert dict(sect.items()) == {'host': 'localhost'}


def test_section_overwrite_keeps_last() -> None:
    sect = Section()
    sect.set_field('a', '1')
    sect.set_field('a', '2')
    assert sect['a'] == '2'
    assert len(sect) == 1


def test_section_overwrite_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    sect = Section('server')
    sect.set_field('a', '1')
    sect.set_field('a', '2')
    assert '"a" overridden' in caplog.text


def test_section_missing_field() -> None:
    sect = Section()
    assert sect['nope'] is None
    assert sect.get_field('nope') is None
    assert sect.get_field_as('nope', int) is None
    assert not sect.has_field('nope')
    assert sect.get('nope', 'fallback') == 'fallback'


def test_section_typed_lookup() -> None:
    sect = Section()
    sect.set_field('port', '8080')
    sect.set_field('ratio', '0.5')
    sect.set_field('debug', 'Y')
    sect.set_field('quiet', 'nope')
    sect.set_field('big', '99999999999999999999')
    assert sect.get_field_as('port', int) == 8080
    assert sect.get_field_as('ratio', float) == 0.5
    assert sect.get_field_as('debug', bool) is True
    assert sect.get_field_as('quiet', bool) is False
    # the same raw value, read as another kind.
    assert sect.get_field_as('port', float) == 8080.0
    with pytest.raises(ValueOutOfRangeError):
        sect.get_field_as('big', ctypes.c_int32)
    with pytest.raises(InvalidValueError):
        sect.get_field_as('ratio', int)
    # failures do not break the section.
    assert sect['big'] == '99999999999999999999'


def test_section_typed_helpers() -> None:
    sect = Section()
    sect.set_field('port', '8080')
    sect.set_field('on', 'true')
    sect.set_field('bad', 'x')
    assert sect.get_int('port') == 8080
    assert sect.get_int('missing', 42) == 42
    assert sect.get_int('port', kind=ctypes.c_uint16) == 8080
    assert sect.get_bool('on', False) is True
    assert sect.get_bool('missing', False) is False
    assert sect.get_float('missing', 1.5) == 1.5
    # defaults only cover absence.
    with pytest.raises(InvalidValueError):
        sect.get_int('bad', 0)


def test_section_get_list() -> None:
    sect = Section()
    sect.set_field('hosts', 'a, b,,c ')
    assert sect.get_list('hosts') == ('a', 'b', 'c')
    assert sect.get_list('hosts', sep=';') == ('a, b,,c',)
    assert sect.get_list('missing') == ()


def test_section_get_list_trims_like_values() -> None:
    sect = Section()
    sect.set_field('hosts', '\ta ,\x0cb\x0c, c')
    # only spaces and tabs are trimmed.
    assert sect.get_list('hosts') == ('a', '\x0cb\x0c', 'c')


def test_section_missing_key_is_none_not_key_error() -> None:
    sect = Section()
    sect.set_field('a', '1')
    assert sect['missing'] is None
    assert 'missing' not in sect
    assert list(sect.values()) == ['1']
    assert all(isinstance(v, str) for v in sect.values())


def test_section_to_dict_is_a_copy() -> None:
    sect = Section()
    sect.set_field('a', '1')
    dumped = sect.to_dict()
    dumped['a'] = '2'
    assert sect['a'] == '1'


def test_group_missing_subsection_is_empty_and_not_created() -> None:
    group = SectionGroup('server')
    missing = group['main']
    assert len(missing) == 0
    assert missing['host'] is None
    assert not group.has_subsection('main')
    assert 'main' not in group
    assert group.get('main') is None


def test_group_setdefault_creates_once() -> None:
    group = SectionGroup('server')
    sub = group.setdefault('main')
    sub.set_field('name', 'x')
    assert group.setdefault('main') is sub
    assert group.has_subsection('main')
    assert group['main']['name'] == 'x'
    assert group.get_subsection('main').name == 'server main'
    assert group.to_dict() == {'main': {'name': 'x'}}


def test_table_chained_lookup_never_fails() -> None:
    table = ConfigTable()
    assert table['x']['y']['z'] is None
    assert table.get_section('x').get_subsection('y').get_field('z') is None
    assert table['x']['y'].get_field_as('z', bool) is None
    assert table.find_field('x', 'z', 'y') is None
    assert not table.has_section('x')
    assert len(table) == 0
    assert table.get('x') is None


def test_table_empty_defaults_are_fresh() -> None:
    table = ConfigTable()
    assert table['x'] is not table['x']
    table['x'][''].set_field('leak', '1')
    assert table['x']['']['leak'] is None
    assert not table.has_section('x')


def test_table_setdefault() -> None:
    table = ConfigTable()
    table.setdefault('server').setdefault('').set_field('host', 'h')
    assert table.has_section('server')
    assert table['server'].has_subsection('')
    assert table.find_field('server', 'host') == 'h'
    assert table.to_dict() == {'server': {'': {'host': 'h'}}}
    assert list(table) == ['server']


def test_table_header() -> None:
    table = ConfigTable()
    table.setdefault('').setdefault('').set_field('k', 'v')
    assert table.header['k'] == 'v'
