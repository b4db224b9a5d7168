# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 22:58:36
# @Author : Kariko Lin

"""Parser of `xrdb -query` output.

Each line looks like

    URxvt*background:	#282828

and we do parsing based on the following consumption:
1. `!` comments and blank lines carry nothing.
2. The *first* `:` separates name and value, values may contain more.
3. The *last* `.` or `*` of the name separates component and property.
Both qualifiers are treated the same.
4. A value ending with `\\` continues on the next line.
Comments and lines without `:` never continue.
"""

from io import TextIOBase

from ..abstract import CommandHandler, MalformedLine
from ..lines import is_blank, joined, numbered, skipped
from .model import ResourceEntry, ResourceTable

QUALIFIERS = '.*'


class XrdbParser(CommandHandler[ResourceTable]):
    def __init__(self, *command: str, encoding: str | None = None) -> None:
        # bare `xrdb` loads resources from stdin, `-query` dumps them.
        super().__init__(*(command or ('xrdb', '-query')), encoding=encoding)

    @staticmethod
    def parseline(line: str) -> ResourceEntry:
        if ':' not in line:
            raise MalformedLine('no separator')
        name, val = line.split(':', 1)
        name = name.strip()

        pos = max(name.rfind(i) for i in QUALIFIERS)
        if pos < 0:
            raise MalformedLine('no component')
        prop = name[pos + 1:].strip()
        if not prop:
            raise MalformedLine('empty property')
        return ResourceEntry(name[:pos], prop, val.strip())

    @staticmethod
    def readstream(buf: TextIOBase) -> ResourceTable:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        def entries():
            lines = joined(numbered(buf), comments='!', separator=':')
            for lineno, line in lines:
                if is_blank(line, '!'):
                    continue
                try:
                    yield XrdbParser.parseline(line)
                except MalformedLine as e:
                    skipped(lineno, line, e)

        return ResourceTable(entries())
