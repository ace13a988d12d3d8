# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""String helpers shared by the parser and the interpolator.

`str.strip()` without arguments follows Unicode whitespace rules,
which would also eat things like `\\u3000` or `\\x85`.
INI lines are trimmed with the "C" locale set instead,
so the result never depends on what the text happens to contain.
"""

# isspace() in the "C" locale.
C_WHITESPACE = ' \t\n\v\f\r'


def ltrim(s: str) -> str:
    return s.lstrip(C_WHITESPACE)


def rtrim(s: str) -> str:
    return s.rstrip(C_WHITESPACE)


def trim(s: str) -> str:
    return s.strip(C_WHITESPACE)


def replace(s: str, old: str, new: str) -> tuple[str, bool]:
    """Replace every literal occurrence of `old` in `s`, left to right.

    Returns the new string and whether anything matched.
    Note that a match counts as a change even if `old == new`.
    """
    if not old or old not in s:
        return s, False
    return s.replace(old, new), True
