# -*- encoding: utf-8 -*-
# @File   : keytable.py
# @Time   : 2026/10/13 22:30:05
# @Author : Kariko Lin

import logging

from .consts import KeySym, Level, Modifier
from .model import KeyCode, KeyMap, KeyRecord
from .parser import XmodmapParser


class KeyTable:
    """Keyboard mapping of the running X server.

    ```python
    keys = KeyTable()  # runs xmodmap right away
    keys.get_key(KeySym.XK_a)
    ```

    Unlike `Xrdb` there's no `read()`: the table is loaded once when
    constructed, and construction raises `InvocationError` if xmodmap
    couldn't be run. Pass an already parsed `keymap` to skip that.
    """

    def __init__(
        self, keymap: KeyMap | None = None, *,
        parser: XmodmapParser | None = None
    ) -> None:
        if keymap is None:
            parser = parser if parser is not None else XmodmapParser()
            keymap = parser.read()
            logging.debug(f'{parser}: {len(keymap)} key codes')
        self._keymap = keymap

    @property
    def keymap(self) -> KeyMap:
        return self._keymap

    def get_key(self, sym: KeySym) -> KeyRecord | None:
        """Record of the lowest key code bound to `sym`, if any."""
        return self._keymap.get_key(sym)

    def get_modifier(self, modifier: Modifier) -> frozenset[KeyCode]:
        """Key codes carrying `modifier`, empty when it's unbound."""
        return self._keymap.get_modifier(modifier)

    def get_keysym(self, code: KeyCode,
                   level: int = Level.KEY) -> KeySym | None:
        return self._keymap.get_keysym(code, level)
