# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure: an ordered dict of ordered dicts,
plus a log of the lines the parser refused.

Reading and writing text lives in `ini.parser`,
`${...}` expansion lives in `ini.interpolate`.
"""

import os
from collections.abc import Mapping, MutableMapping
from io import StringIO
from typing import TYPE_CHECKING, Iterable, Iterator, TypeVar
from warnings import warn

from .extract import extract
from .interpolate import MAX_INTERPOLATION_DEPTH, interpolate

if TYPE_CHECKING:
    from .parser import IniParser

T = TypeVar('T')


class IniSection(MutableMapping[str, str]):
    """... is a dict, just maintaining pairs of one section.

    All pairs SHOULD be `str: str` (even if the value is empty),
    however in runtime we wouldn't limit that much, only warn.

    Note: `self[key] = value` overwrites like any dict.
    The parser uses `self.insert()` instead, where the first value wins.
    """
    def __init__(self, pairs_to_import: Mapping[str, str] | None = None):
        self.__raw: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            warn(f'INI value of "{key}" is not a str: {value!r}.')
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniSection):
            return self.__raw == other.__raw
        return super().__eq__(other)

    def __repr__(self) -> str:
        return self.__raw.__repr__()

    def insert(self, key: str, value: str) -> bool:
        """Add the pair only if `key` is absent.

        Returns:
            `True` if inserted, `False` if `key` already existed
            (and its value is kept as is).
        """
        if key in self.__raw:
            return False
        self[key] = value
        return True

    def extract(self, key: str, type_: type[T]) -> tuple[bool, T | None]:
        """Typed lookup, see `ini.extract.extract()`.

        A missing key is just another failure, no `KeyError`.
        """
        if key not in self.__raw:
            return False, None
        return extract(self.__raw[key], type_)


class IniClass(MutableMapping[str, IniSection]):
    """... is simply a group of dict, representing a whole INI file.

        ```ini
        key = val  ; pairs before any header, see self[''].

        [section]
        key233 = val666
        addr = ${host}:${other:port}  ; see self.interpolate().
        ```

    Lines the parser refused are kept in `self.errors`, in input order.
    """
    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}
        self.errors: list[str] = []

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __eq__(self, other: object) -> bool:
        """Compares content only, `errors` are not taken into account."""
        if isinstance(other, IniClass):
            return self.__raw == other.__raw
        return super().__eq__(other)

    def __repr__(self) -> str:
        return '<IniClass { .sections = %d, .errors = %d }>' % (
            len(self.__raw), len(self.errors))

    def setdefault(  # type: ignore[override]
        self, section: str,
        default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If `section` not in self, then add it (as a copy of `default`).

        Returns the section stored in self, never a copy of it.
        """
        if section not in self.__raw:
            self.__raw[section] = IniSection(default)
        return self.__raw[section]

    def default_section(self, pairs: Mapping[str, str]) -> None:
        """Merge `pairs` into EVERY existing section, without overriding.

        No section gets created here, even on an empty document.
        """
        for sect in self.__raw.values():
            for key, val in pairs.items():
                sect.insert(key, val)

    def clear(self) -> None:
        self.__raw.clear()
        self.errors.clear()

    def parse(
        self, src: str | Iterable[str],
        parser: 'IniParser | None' = None
    ) -> 'IniClass':
        """Read INI text into self. Sections and errors accumulate.

        Args:
            src: the whole text, or any iterable of lines (e.g. a file).
            parser: an `IniParser` (or subclass) deciding what a comment is.
        """
        from .parser import IniParser  # parser imports this module

        if parser is None:
            parser = IniParser()
        if isinstance(src, str):
            src = StringIO(src)
        return parser.readstream(src, self)

    def generate(
        self, parser: 'IniParser | None' = None,
        newline: str = os.linesep
    ) -> str:
        """Serialize self to INI text, see `IniParser.writestream()`."""
        from .parser import IniParser

        if parser is None:
            parser = IniParser()
        buf = StringIO()
        parser.writestream(self, buf, newline=newline)
        return buf.getvalue()

    def interpolate(self, max_depth: int = MAX_INTERPOLATION_DEPTH) -> int:
        """Expand `${key}` and `${section:key}` in place.

        Returns how many global passes were run.
        """
        return interpolate(self, max_depth)
