# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .extract import extract
from .interpolate import MAX_INTERPOLATION_DEPTH, interpolate
from .model import IniClass, IniSection
from .parser import IniParser, IniYamlParser, InvalidIniDocument, VbIniParser
