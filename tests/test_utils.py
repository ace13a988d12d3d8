"""Tests for the pyinipp.ini.utils module."""

from pyinipp.ini.utils import ltrim, replace, rtrim, trim


class TestTrim:
    """Tests for the C locale trimming helpers."""

    def test_trim_both_sides(self) -> None:
        """Strip spaces, tabs and line breaks on both ends."""
        assert trim(' \t key = val \r\n') == 'key = val'

    def test_ltrim_rtrim(self) -> None:
        """Strip only the requested side."""
        assert ltrim('  a  ') == 'a  '
        assert rtrim('  a  ') == '  a'

    def test_vertical_tab_and_form_feed(self) -> None:
        """Treat \\v and \\f as whitespace, as the C locale does."""
        assert trim('\v\fa\f\v') == 'a'

    def test_unicode_whitespace_kept(self) -> None:
        """Leave non C locale whitespace alone."""
        assert trim('　a\xa0') == '　a\xa0'


class TestReplace:
    """Tests for literal substring replacement."""

    def test_all_occurrences(self) -> None:
        """Replace every occurrence and report a change."""
        assert replace('${a}-${a}', '${a}', 'x') == ('x-x', True)

    def test_no_match(self) -> None:
        """Report no change when nothing matches."""
        assert replace('abc', 'z', 'y') == ('abc', False)

    def test_same_text_counts_as_change(self) -> None:
        """A match is a change even if the text stays the same."""
        assert replace('aa', 'a', 'a') == ('aa', True)

    def test_replacement_not_rescanned(self) -> None:
        """Do not rescan the inserted text within one call."""
        assert replace('a', 'a', 'aa') == ('aa', True)

    def test_empty_pattern(self) -> None:
        """Never match an empty pattern."""
        assert replace('abc', '', 'x') == ('abc', False)
