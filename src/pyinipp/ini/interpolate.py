# -*- encoding: utf-8 -*-
# @File   : interpolate.py
# @Time   : 2024/10/13 15:02:44
# @Author : Kariko Lin

"""`${...}` expansion over an `IniClass`, in place.

Two kinds of reference are understood:

    ```ini
    [default]
    ip = 127.0.0.1
    [net]
    port = 80
    address = ${default:ip}:${port}  ; => 127.0.0.1:80
    ```

1. Bare `${key}` points into the section holding the value.
It is rewritten to `${section:key}` once, before anything else.
2. Every `${section:key}` is then replaced with the current value,
pass after pass, until a pass changes nothing
or `MAX_INTERPOLATION_DEPTH` passes have run.

CAUTION: this is plain substring replacement, not an expression parser.
Symbols are applied in section order then key order,
and a replacement may itself contain another symbol.
Circular references are not detected,
they just stay half-expanded once the passes run out.
"""

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, TypeAlias

from .utils import replace

if TYPE_CHECKING:
    from .model import IniClass

MAX_INTERPOLATION_DEPTH = 10

CHAR_INTERPOL = '$'
CHAR_INTERPOL_START = '{'
CHAR_INTERPOL_SEP = ':'
CHAR_INTERPOL_END = '}'

Symbols: TypeAlias = list[tuple[str, str]]


def local_symbol(name: str) -> str:
    return f'{CHAR_INTERPOL}{CHAR_INTERPOL_START}{name}{CHAR_INTERPOL_END}'


def global_symbol(section: str, name: str) -> str:
    return local_symbol(f'{section}{CHAR_INTERPOL_SEP}{name}')


def local_symbols(section: str, pairs: MutableMapping[str, str]) -> Symbols:
    return [(local_symbol(k), global_symbol(section, k)) for k in pairs]


def global_symbols(ins: 'IniClass') -> Symbols:
    """Snapshot of `${section:key} -> value` with values as they are NOW.

    Values that are not `str` are substituted as `str(value)`.
    """
    return [
        (global_symbol(section, k), v if isinstance(v, str) else str(v))
        for section, pairs in ins.items()
        for k, v in pairs.items()
    ]


def replace_symbols(syms: Symbols, pairs: MutableMapping[str, str]) -> bool:
    changed = False
    for pattern, repl in syms:
        for key in list(pairs):
            if not isinstance(pairs[key], str):
                continue  # nothing to expand, keep it as stored.
            pairs[key], hit = replace(pairs[key], pattern, repl)
            changed |= hit
    return changed


def interpolate(
    ins: 'IniClass', max_depth: int = MAX_INTERPOLATION_DEPTH
) -> int:
    """Expand references in every value of `ins`. Never raises.

    Returns:
        the number of global passes run, at most `max_depth`.
    """
    for section, pairs in ins.items():
        replace_symbols(local_symbols(section, pairs), pairs)

    depth, changed = 0, True
    while changed and depth < max_depth:
        syms = global_symbols(ins)
        changed = False
        for pairs in ins.values():
            changed |= replace_symbols(syms, pairs)
        depth += 1
        logging.debug(f'Interpolation pass {depth}: changed = {changed}.')

    if changed:
        logging.warning(
            f'Interpolation stopped after {depth} passes with values '
            'still changing. Circular or too deep references may be left.')
    return depth
