"""Tests for the pyinipp.ini.model module."""

import pytest

from pyinipp import IniClass, IniSection


class TestIniSection:
    """Tests for IniSection."""

    def test_insert_first_wins(self) -> None:
        """Insert only absent keys."""
        sect = IniSection()
        assert sect.insert('k', '1') is True
        assert sect.insert('k', '2') is False
        assert sect['k'] == '1'

    def test_setitem_overwrites(self) -> None:
        """Overwrite through item assignment, like a dict."""
        sect = IniSection({'k': '1'})
        sect['k'] = '2'
        assert sect['k'] == '2'

    def test_keeps_order(self) -> None:
        """Iterate keys in insertion order."""
        sect = IniSection()
        for k in 'zyx':
            sect[k] = k
        assert list(sect) == ['z', 'y', 'x']

    def test_non_str_value_warns(self) -> None:
        """Warn, but store, a value that is not a str."""
        sect = IniSection()
        with pytest.warns(UserWarning):
            sect['port'] = 80  # type: ignore[assignment]
        assert sect['port'] == 80

    def test_extract(self) -> None:
        """Extract typed values by key."""
        sect = IniSection({'port': ' 80 ', 'on': 'true'})
        assert sect.extract('port', int) == (True, 80)
        assert sect.extract('on', bool) == (True, True)
        assert sect.extract('missing', int) == (False, None)


class TestIniClass:
    """Tests for IniClass."""

    def test_setitem_copies(self) -> None:
        """Store a copy of the mapping given."""
        src = {'k': 'v'}
        doc = IniClass()
        doc['s'] = src
        src['k'] = 'changed'
        assert isinstance(doc['s'], IniSection)
        assert doc['s']['k'] == 'v'

    def test_setdefault_returns_stored_section(self) -> None:
        """Return the live section, creating it once."""
        doc = IniClass()
        sect = doc.setdefault('s')
        sect['k'] = 'v'
        assert doc.setdefault('s', {'other': 'x'}) is sect
        assert dict(doc['s']) == {'k': 'v'}

    def test_default_section_does_not_override(self) -> None:
        """Add missing defaults without touching existing keys."""
        doc = IniClass().parse('[a]\nx=0\n[b]\ny=2\n')
        doc.default_section({'x': '1'})
        assert doc['a']['x'] == '0'
        assert doc['b']['x'] == '1'
        assert list(doc['b']) == ['y', 'x']

    def test_default_section_creates_nothing(self) -> None:
        """Leave an empty document empty."""
        doc = IniClass()
        doc.default_section({'x': '1'})
        assert len(doc) == 0

    def test_clear(self) -> None:
        """Drop sections and errors alike."""
        doc = IniClass().parse('[s]\nk=v\nbad\n')
        doc.clear()
        assert len(doc) == 0
        assert doc.errors == []

    def test_equality_ignores_errors(self) -> None:
        """Compare content only."""
        a = IniClass().parse('[s]\nk=v\n')
        b = IniClass().parse('[s]\nk=v\nbad\n')
        assert a == b
        assert a != IniClass().parse('[s]\nk=w\n')

    def test_delete_section(self) -> None:
        """Remove a section like a dict key."""
        doc = IniClass().parse('[a]\n[b]\n')
        del doc['a']
        assert list(doc) == ['b']
