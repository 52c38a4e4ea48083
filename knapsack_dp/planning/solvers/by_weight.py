# -*- coding: utf-8 -*-
"""
Weight-indexed DP, capacity constraint only.

cell(n, w) = highest-value group using the first n items with total
weight <= w.
"""

from __future__ import annotations
from typing import Optional, Tuple

from knapsack_dp.planning.memo import Cell, Key
from knapsack_dp.planning.solution import ItemGroup
from .base import DPEngine, Lookup, more_value, prefer


class WeightDPEngine(DPEngine):
    shape = "weight"

    def axes(self) -> Tuple[range, ...]:
        return range(len(self.items) + 1), range(self.constraints.capacity + 1)

    def _base_case(self, key: Key) -> Optional[Cell]:
        n, w = key
        if n == 0 or w < 0:
            return ItemGroup.empty()
        return None

    def _recurrence(self, key: Key, lookup: Lookup) -> Cell:
        n, w = key
        item = self.items[n - 1]
        excluded = lookup(n - 1, w)
        if item.weight > w:
            return excluded
        included = lookup(n - 1, w - item.weight).extend(item)
        return prefer(excluded, included, more_value)

    def _answer(self, lookup: Lookup) -> ItemGroup:
        return lookup(len(self.items), self.constraints.capacity)
