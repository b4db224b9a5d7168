# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 22:41:37
# @Author : Kariko Lin

from .consts import ALL_LOWER_CASE, ALL_UPPER_CASE, KeySym, Level, Modifier
from .model import KeyCode, KeyMap, KeyRecord
from .parser import XmodmapParser
from .keytable import KeyTable
