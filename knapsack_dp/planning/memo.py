# -*- coding: utf-8 -*-
"""
Memo table for the DP engines.

Every key is in one of three states:
  - absent           : not computed yet
  - INFEASIBLE       : computed; no subset satisfies the state
  - an ItemGroup     : computed; the best subset (possibly empty)

Cells are written once. One table belongs to one engine run.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional, Tuple, Union

from knapsack_dp.business_objects.errors import StateValidationError
from knapsack_dp.planning.solution import ItemGroup

Key = Tuple[int, ...]


class _Infeasible:
    """Marker for a computed cell that no subset can satisfy."""
    _instance: Optional["_Infeasible"] = None

    def __new__(cls) -> "_Infeasible":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INFEASIBLE"


INFEASIBLE = _Infeasible()

Cell = Union[ItemGroup, _Infeasible]


class MemoTable:
    """Write-once mapping from integer tuple keys to cells."""

    def __init__(self) -> None:
        self._cells: Dict[Key, Cell] = {}

    def __contains__(self, key: Key) -> bool:
        return key in self._cells

    def __getitem__(self, key: Key) -> Cell:
        return self._cells[key]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._cells)

    def get(self, key: Key) -> Optional[Cell]:
        """Cell at key, or None when it has not been computed."""
        return self._cells.get(key)

    def store(self, key: Key, cell: Cell) -> Cell:
        if key in self._cells:
            raise StateValidationError(f"Memo cell {key} is already computed.")
        self._cells[key] = cell
        return cell

    @property
    def cells_computed(self) -> int:
        return len(self._cells)


def is_feasible(cell: Optional[Cell]) -> bool:
    return isinstance(cell, ItemGroup)
