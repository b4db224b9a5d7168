# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/13 21:02:44
# @Author : Kariko Lin

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, Iterator

from .consts import KeySym, Level, Modifier

# Key code as referenced by xmodmap
KeyCode = int


@dataclass(frozen=True, kw_only=True)
class KeyRecord:
    code: KeyCode
    # (column index, symbol) pairs by column. unknown columns are simply
    # absent, so `symbols` may be shorter than the printed line.
    levels: tuple[tuple[int, KeySym], ...] = ()
    modifiers: frozenset[Modifier] = frozenset()

    @property
    def symbols(self) -> tuple[KeySym, ...]:
        return tuple(sym for _, sym in self.levels)

    def keysym(self, level: int = Level.KEY) -> KeySym | None:
        for col, sym in self.levels:
            if col == level:
                return sym
        return None

    def __contains__(self, sym: object) -> bool:
        return sym in self.symbols


class KeyMap(Mapping[KeyCode, KeyRecord]):
    """Master table of key codes, their symbols and modifiers.

    Read only. Records are kept in ascending key code order,
    which is also how `get_key()` breaks ties.
    """

    def __init__(self, records: Iterable[KeyRecord] = ()) -> None:
        self.__data: dict[KeyCode, KeyRecord] = {
            i.code: i for i in sorted(records, key=lambda x: x.code)}
        self.__index: dict[KeySym, KeyRecord] = {}
        for rec in self.__data.values():
            for sym in rec.symbols:
                # lowest key code wins.
                self.__index.setdefault(sym, rec)

    def __getitem__(self, code: KeyCode) -> KeyRecord:
        return self.__data[code]

    def __iter__(self) -> Iterator[KeyCode]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self.__data.values())!r})'

    def get_key(self, sym: KeySym) -> KeyRecord | None:
        return self.__index.get(sym)

    def get_modifier(self, modifier: Modifier) -> frozenset[KeyCode]:
        return frozenset(
            code for code, rec in self.__data.items()
            if modifier in rec.modifiers)

    def get_keysym(self, code: KeyCode,
                   level: int = Level.KEY) -> KeySym | None:
        if code not in self.__data:
            return None
        return self.__data[code].keysym(level)
