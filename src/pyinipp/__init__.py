# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:20:37
# @Author : Kariko Lin

import logging

from .ini import (
    MAX_INTERPOLATION_DEPTH,
    IniClass,
    IniParser,
    IniSection,
    IniYamlParser,
    InvalidIniDocument,
    VbIniParser,
    extract,
    interpolate,
)

__all__ = [
    'IniClass', 'IniSection',
    'IniParser', 'VbIniParser', 'IniYamlParser', 'InvalidIniDocument',
    'interpolate', 'MAX_INTERPOLATION_DEPTH', 'extract',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
