"""Precedence table: canonical class names mapped to their output rank."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from tailsort.catalog.classes import SORTED_CLASSES


class PrecedenceTable(Mapping[str, int]):
    """Read-only ``class name -> rank`` mapping.

    Ranks are 0-based positions in the order the names were supplied. When a
    name is repeated, its last position is kept.
    """

    def __init__(self, ranks: Mapping[str, int], *, builtin: bool = False) -> None:
        self._ranks = MappingProxyType(dict(ranks))
        self.builtin = builtin

    @classmethod
    def from_order(cls, names: Iterable[str], *, builtin: bool = False) -> PrecedenceTable:
        ranks: dict[str, int] = {}
        for index, name in enumerate(names):
            ranks[name] = index
        return cls(ranks, builtin=builtin)

    def rank(self, name: str) -> int | None:
        return self._ranks.get(name)

    def __getitem__(self, name: str) -> int:
        return self._ranks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranks)

    def __len__(self) -> int:
        return len(self._ranks)

    def __repr__(self) -> str:
        kind = "builtin" if self.builtin else "custom"
        return f"PrecedenceTable({kind}, {len(self._ranks)} classes)"


BUILTIN_TABLE = PrecedenceTable.from_order(SORTED_CLASSES, builtin=True)
