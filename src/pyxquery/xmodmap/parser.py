# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 21:47:20
# @Author : Kariko Lin

"""Parser of `xmodmap -pm -pke` output.

Two kinds of lines may show up in one dump, told apart by their shape:

    keycode  38 = a A a A
    shift       Shift_L (0x32),  Shift_R (0x3e)

Key codes are decimal in the former and hex in the latter.
Modifier membership is resolved only after the whole dump was read,
since xmodmap prints the modifier map first.
"""

import logging
from io import TextIOBase
from re import compile as regex

from ..abstract import CommandHandler, MalformedLine
from ..lines import is_blank, numbered, skipped
from .consts import KeySym, Modifier
from .model import KeyCode, KeyMap, KeyRecord

KEYCODE_LINE = regex(r'^\s*keycode\s+(\d+)\s*=(.*)$')
MODIFIER_LINE = regex(r'^\s*(\w+)(?:\s+(.*))?$')
MODIFIER_PAIR = regex(r'(\S+)\s+\((0x[0-9a-fA-F]+)\)')


class XmodmapParser(CommandHandler[KeyMap]):
    def __init__(self, *command: str, encoding: str | None = None) -> None:
        super().__init__(
            *(command or ('xmodmap', '-pm', '-pke')), encoding=encoding)

    @staticmethod
    def parse_keycode(line: str) -> tuple[KeyCode, dict[int, KeySym]]:
        if (m := KEYCODE_LINE.match(line)) is None:
            raise MalformedLine('not a keycode line')
        levels: dict[int, KeySym] = {}
        for col, name in enumerate(m[2].split()):
            if (sym := KeySym.lookup(name)) is None:
                # e.g. NoSymbol, or just something we don't know.
                continue
            levels[col] = sym
        return int(m[1]), levels

    @staticmethod
    def parse_modifier(line: str) -> tuple[Modifier, list[KeyCode]]:
        if (m := MODIFIER_LINE.match(line)) is None:
            raise MalformedLine('not a modifier line')
        try:
            mod = Modifier(m[1])
        except ValueError:
            raise MalformedLine(f'unknown modifier "{m[1]}"') from None

        rest = m[2] or ''
        if MODIFIER_PAIR.sub('', rest).strip(' \t,'):
            raise MalformedLine('garbage among "symbol (code)" pairs')
        return mod, [int(code, 16) for _, code in MODIFIER_PAIR.findall(rest)]

    @staticmethod
    def readstream(buf: TextIOBase) -> KeyMap:
        keys: dict[KeyCode, dict[int, KeySym]] = {}
        mods: dict[Modifier, list[KeyCode]] = {}
        for lineno, line in numbered(buf):
            if is_blank(line):
                continue
            try:
                if KEYCODE_LINE.match(line):
                    code, levels = XmodmapParser.parse_keycode(line)
                    keys[code] = levels
                else:
                    mod, codes = XmodmapParser.parse_modifier(line)
                    mods[mod] = codes
            except MalformedLine as e:
                skipped(lineno, line, e)
        return XmodmapParser._crossref(keys, mods)

    @staticmethod
    def _crossref(
        keys: dict[KeyCode, dict[int, KeySym]],
        mods: dict[Modifier, list[KeyCode]]
    ) -> KeyMap:
        owners: dict[KeyCode, set[Modifier]] = {i: set() for i in keys}
        for mod, codes in mods.items():
            for code in codes:
                if code not in owners:
                    logging.debug(
                        f'{mod.value}: key code {code:#x} never defined, '
                        'dropped.')
                    continue
                owners[code].add(mod)
        return KeyMap(
            KeyRecord(
                code=code,
                levels=tuple(sorted(levels.items())),
                modifiers=frozenset(owners[code]))
            for code, levels in keys.items())
