# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:31:50
# @Author : Kariko Lin

import logging

from .abstract import (
    InvocationError,
    ExecutableNotFound,
    UtilityFailed,
    NotLoadedError
)
from .xrdb import Xrdb, XrdbParser, ResourceTable, ResourceEntry
from .xmodmap import (
    KeyTable,
    XmodmapParser,
    KeyMap,
    KeyRecord,
    KeySym,
    Modifier,
    Level
)

__all__ = [
    'InvocationError', 'ExecutableNotFound', 'UtilityFailed',
    'NotLoadedError',
    'Xrdb', 'XrdbParser', 'ResourceTable', 'ResourceEntry',
    'KeyTable', 'XmodmapParser', 'KeyMap', 'KeyRecord',
    'KeySym', 'Modifier', 'Level'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
