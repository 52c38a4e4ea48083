# -*- coding: utf-8 -*-
"""
Profit-indexed DP, capacity constraint only.

cell(n, p) = lowest-weight group using the first n items whose total value
is exactly p, or INFEASIBLE if no such group exists.

The profit axis runs 0..profit_upper_bound (floor of the LP relaxation), so
the table stays O(N * bound) instead of O(N * sum of values). The answer is
the highest p whose group fits the capacity.
"""

from __future__ import annotations
from typing import Optional, Tuple

from knapsack_dp.heuristics.bounds import profit_upper_bound
from knapsack_dp.planning.memo import INFEASIBLE, Cell, Key, is_feasible
from knapsack_dp.planning.solution import ItemGroup
from knapsack_dp.planning.state import ProblemState
from .base import DPEngine, Lookup, less_weight, prefer


class ProfitDPEngine(DPEngine):
    shape = "profit"

    def __init__(
        self,
        state: ProblemState,
        strategy: str = "recursive",
        upper_bound: Optional[int] = None,
    ) -> None:
        super().__init__(state, strategy)
        if upper_bound is None:
            upper_bound = profit_upper_bound(state.items, state.constraints)
        self.upper_bound = upper_bound

    def axes(self) -> Tuple[range, ...]:
        return range(len(self.items) + 1), range(self.upper_bound + 1)

    def _base_case(self, key: Key) -> Optional[Cell]:
        n, p = key
        if p < 0:
            return INFEASIBLE
        if n == 0:
            return ItemGroup.empty() if p == 0 else INFEASIBLE
        return None

    def _recurrence(self, key: Key, lookup: Lookup) -> Cell:
        n, p = key
        item = self.items[n - 1]
        excluded = lookup(n - 1, p)
        if item.value > p:
            return excluded
        prior = lookup(n - 1, p - item.value)
        if not is_feasible(prior):
            return excluded
        return prefer(excluded, prior.extend(item), less_weight)

    def _answer(self, lookup: Lookup) -> ItemGroup:
        n = len(self.items)
        for p in range(self.upper_bound, -1, -1):
            group = lookup(n, p)
            if is_feasible(group) and group.total_weight <= self.constraints.capacity:
                return group
        # cell(n, 0) is always the empty group
        return ItemGroup.empty()
