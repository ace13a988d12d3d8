# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Read and write `IniClass` as INI text (or YAML).

The reader is a best-effort single pass, line by line:

1. comments (see `IniParser.is_comment()`) and blank lines are skipped;
2. `[name]` switches the current section, creating it if needed;
3. `key = value` goes into the current section, FIRST value wins;
4. anything else, a `[name` without `]`, or a redefined key
is appended to `IniClass.errors` and reading just goes on.

Pairs before any header belong to the section named `''`.
"""

import logging
from io import StringIO, TextIOBase
from typing import Any, Iterable

import chardet
import yaml

from .model import IniClass
from .utils import ltrim, rtrim, trim
from ..abstract import FileHandler


class InvalidIniDocument(ValueError):
    """To record a document that cannot be mapped onto `IniClass`."""
    pass


class IniParser(FileHandler[IniClass]):
    CHAR_SECTION_START = '['
    CHAR_SECTION_END = ']'
    CHAR_ASSIGN = '='

    # override this (or `is_comment()` itself) for other dialects.
    comment_chars: tuple[str, ...] = (';',)

    def __init__(
        self, filename: str | None = None, encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def is_comment(self, ch: str) -> bool:
        """Whether a (trimmed, non-empty) line starting with `ch`
        is a comment line."""
        return ch in self.comment_chars

    def _reject(self, ins: IniClass, line: str) -> None:
        ins.errors.append(line)
        logging.debug(f'Rejected INI line: {line!r}')

    def readstream(
        self, buf: Iterable[str], ins: IniClass | None = None
    ) -> IniClass:
        """读取解码好的字符串流 (or any iterable of lines).

        If `ins` is given, sections are merged into it,
        otherwise a new `IniClass` is returned.
        """
        if ins is None:
            ins = IniClass()
        if isinstance(buf, str):
            buf = StringIO(buf)
        section = ''
        for i in buf:
            line = trim(i)
            if not line or self.is_comment(line[0]):
                continue
            if line[0] == self.CHAR_SECTION_START:
                if line[-1] == self.CHAR_SECTION_END:
                    section = line[1:-1]
                    ins.setdefault(section)
                else:
                    self._reject(ins, line)
                continue
            pos = line.find(self.CHAR_ASSIGN)
            if pos <= 0:  # no '=' at all, or no key.
                self._reject(ins, line)
                continue
            key, val = rtrim(line[:pos]), ltrim(line[pos + 1:])
            if not ins.setdefault(section).insert(key, val):
                self._reject(ins, line)
        return ins

    def writestream(
        self, instance: IniClass, buf: TextIOBase, *, newline: str = '\n'
    ) -> None:
        """Nothing gets escaped: a value with `\\n`, `=` or `[`
        may not read back the same."""
        for sect, data in instance.items():
            buf.write(
                f'{self.CHAR_SECTION_START}{sect}{self.CHAR_SECTION_END}'
                f'{newline}')
            for key, val in data.items():
                buf.write(f'{key}{self.CHAR_ASSIGN}{val}{newline}')
            buf.write(newline)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.info(f'Decoding {filename} as {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        # keep '\r\n' out of the lines, like text mode `open()` does.
        return StringIO(buf, newline=None)

    def read(self, ins: IniClass | None = None) -> IniClass:
        """读取`IniParser`实例指定的文件。

        Note: `OSError` is NOT handled here.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            # decode everything first, `ins` must not get half a file.
            with open(self.filename, 'r', encoding=self._codec) as fp:
                buf = StringIO(fp.read())
        except UnicodeDecodeError:
            buf = self._decode_file(self.filename)
        return self.readstream(buf, ins)

    def write(self, instance: IniClass) -> None:
        """保存到*一个* INI 文件, using the platform line terminator."""
        with open(self.filename, 'w', encoding=self._codec) as fp:
            self.writestream(instance, fp)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


class VbIniParser(IniParser):
    """Visual Basic flavoured INI, where `'` starts a comment as well."""
    comment_chars = (';', "'")


class IniYamlParser(FileHandler[IniClass]):
    """Dump `IniClass` to YAML, a mapping of mappings, and back.

        ```yaml
        default:
          ip: 127.0.0.1
        net:
          address: ${default:ip}:80
        ```

    Scalars read back are turned into INI style strings,
    e.g. `true` instead of `True`, and `~` into an empty value.
    """
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def _to_value(val: Any) -> str:
        if val is None:
            return ''
        if isinstance(val, bool):
            return 'true' if val else 'false'
        return str(val)

    def read(self) -> IniClass:
        with open(self.filename, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        ret = IniClass()
        if src is None:
            return ret
        if not isinstance(src, dict):
            raise InvalidIniDocument(
                f'{self.filename}: top level is not a mapping of sections.')
        for sect, pairs in src.items():
            if pairs is None:
                pairs = {}
            if not isinstance(pairs, dict):
                raise InvalidIniDocument(
                    f'{self.filename}: section "{sect}" is not a mapping.')
            ret[self._to_value(sect)] = {
                self._to_value(k): self._to_value(v)
                for k, v in pairs.items()
            }
        return ret

    def write(self, instance: IniClass) -> None:
        """Only sections and pairs are saved, `errors` are not."""
        data = {sect: dict(pairs) for sect, pairs in instance.items()}
        with open(self.filename, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                data, fp,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False)
