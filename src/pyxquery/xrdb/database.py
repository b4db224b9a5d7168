# -*- encoding: utf-8 -*-
# @File   : database.py
# @Time   : 2026/10/12 23:20:51
# @Author : Kariko Lin

import logging

from ..abstract import NotLoadedError
from .model import ResourceTable
from .parser import XrdbParser


class Xrdb:
    """Read-only view of the X resource database.

    Construction does no I/O. Call `read()` first (and again whenever
    you need fresh values), then `query()`.
    """

    def __init__(self, parser: XrdbParser | None = None) -> None:
        self._parser = parser if parser is not None else XrdbParser()
        self._table: ResourceTable | None = None

    def read(self) -> None:
        """Dump the database and replace the table wholesale.

        Raises `InvocationError` and keeps the previous table
        if the utility is missing or fails.
        """
        table = self._parser.read()
        logging.debug(f'{self._parser}: {len(table)} resources')
        self._table = table

    @property
    def table(self) -> ResourceTable:
        if self._table is None:
            raise NotLoadedError('call read() before querying resources.')
        return self._table

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def query(self, component: str, property: str,
              fallback: bool = False) -> str | None:
        """Exact lookup of `component.property`.

        With `fallback`, a miss tries the universal `*property` entry.
        """
        ret = self.table.query(component, property)
        if ret is None and fallback:
            ret = self.table.query_universal(property)
        return ret

    def query_universal(self, property: str) -> str | None:
        return self.table.query_universal(property)
