# -*- encoding: utf-8 -*-
# @File   : extract.py
# @Time   : 2024/10/13 22:31:09
# @Author : Kariko Lin

from re import compile as regex
from typing import Any, Callable, TypeVar

T = TypeVar('T')

from .utils import trim

_INTEGER = regex(r'[+-]?\d+')
_DECIMAL = regex(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
_BOOLEAN = {'true': True, 'false': False}


def _to_int(text: str) -> int:
    # int() alone would also take '1_000'.
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    return int(text)


def _to_float(text: str) -> float:
    # float() alone would also take 'nan', 'inf' and '1_0'.
    if not _DECIMAL.fullmatch(text):
        raise ValueError(text)
    return float(text)


def _to_bool(text: str) -> bool:
    return _BOOLEAN[text]


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
}


def extract(value: str, type_: type[T]) -> tuple[bool, T | None]:
    """Convert a stored INI value to `type_`.

    The whole (trimmed) value must be consumed, so `'42x'` is NOT an int.
    Booleans are accepted in word form only: `true` / `false`.
    `str` always succeeds and returns `value` as is, spaces included.
    Any other type is called with the trimmed text,
    where `ValueError`, `TypeError` or `ArithmeticError` count as failure.

    Returns:
        `(True, converted)` on success, otherwise `(False, None)`.
    """
    if type_ is str:
        return True, value  # type: ignore[return-value]
    text = trim(value)
    converter = _CONVERTERS.get(type_, type_)
    try:
        return True, converter(text)
    except (ArithmeticError, KeyError, TypeError, ValueError):
        # e.g. decimal.InvalidOperation is an ArithmeticError.
        return False, None
