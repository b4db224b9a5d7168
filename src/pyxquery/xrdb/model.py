# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:31:09
# @Author : Kariko Lin

"""
Resource database as printed by `xrdb -query`.

Wildcards were already resolved by xrdb itself, so there's nothing like
resource matching here, only exact pairs.
"""

from collections.abc import Mapping
from typing import Iterable, Iterator, NamedTuple

ResourceKey = tuple[str, str]


class ResourceEntry(NamedTuple):
    component: str  # may be '' for universal resources like `*foreground`.
    property: str
    value: str


class ResourceTable(Mapping[ResourceKey, str]):
    """`(component, property) -> value`，构造完成后只读。

    Rebuild a new table instead of updating one, that's what `Xrdb.read()`
    does every time.
    """

    def __init__(self, entries: Iterable[ResourceEntry] = ()) -> None:
        self.__data: dict[ResourceKey, str] = {}
        for i in entries:
            # later entries win, the same as xrdb does.
            self.__data[i.component, i.property] = i.value

    def __getitem__(self, key: ResourceKey) -> str:
        return self.__data[key]

    def __iter__(self) -> Iterator[ResourceKey]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.__data!r})'

    def query(self, component: str, property: str) -> str | None:
        return self.__data.get((component, property))

    def query_universal(self, property: str) -> str | None:
        """Look up a resource declared without component, e.g. `*color0`."""
        return self.__data.get(('', property))

    def entries(self) -> Iterator[ResourceEntry]:
        for (comp, prop), val in self.__data.items():
            yield ResourceEntry(comp, prop, val)

    def components(self) -> list[str]:
        """Distinct components, in the order they first showed up."""
        ret: list[str] = []
        for comp, _ in self.__data:
            if comp not in ret:
                ret.append(comp)
        return ret
