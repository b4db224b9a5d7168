# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 23:24:02
# @Author : Kariko Lin

from .model import ResourceEntry, ResourceTable
from .parser import XrdbParser
from .database import Xrdb
