# -*- coding: utf-8 -*-
"""
Joint weight + cardinality DP.

cell(n, k, w) = highest-value group using the first n items, with exactly
k of them chosen and total weight <= w; INFEASIBLE when fewer than k items
have been considered (or no k of them fit).

Two read-outs, both from the full-capacity column:
  - solve_exact(): best group with exactly max_items items
  - solve():       best group over k = 0..max_items; on a value tie the group
                   the weight-only shape would keep (see `_tie_order`)
"""

from __future__ import annotations
from typing import Optional, Tuple

from knapsack_dp.business_objects.errors import ConfigurationError
from knapsack_dp.planning.memo import INFEASIBLE, Cell, Key, is_feasible
from knapsack_dp.planning.solution import ItemGroup
from knapsack_dp.planning.state import ProblemState
from .base import DPEngine, Lookup, more_value, prefer


class CardinalityDPEngine(DPEngine):
    shape = "weight_and_count"

    def __init__(self, state: ProblemState, strategy: str = "recursive") -> None:
        super().__init__(state, strategy)
        # counts above the catalog size are infeasible, no need to tabulate them
        self.max_items = state.constraints.item_limit(len(state.items))

    def axes(self) -> Tuple[range, ...]:
        return (
            range(len(self.items) + 1),
            range(self.max_items + 1),
            range(self.constraints.capacity + 1),
        )

    def _base_case(self, key: Key) -> Optional[Cell]:
        n, k, w = key
        if w < 0:
            return INFEASIBLE
        if k == 0:
            return ItemGroup.empty()
        if k > n:
            return INFEASIBLE
        return None

    def _recurrence(self, key: Key, lookup: Lookup) -> Cell:
        n, k, w = key
        item = self.items[n - 1]
        excluded = lookup(n - 1, k, w)
        if item.weight > w:
            return excluded
        prior = lookup(n - 1, k - 1, w - item.weight)
        if not is_feasible(prior):
            return excluded
        return prefer(excluded, prior.extend(item), more_value)

    def _tie_order(self, group: ItemGroup) -> Tuple[int, ...]:
        """
        Catalog positions of the group's members, highest first.

        Among equal-value groups the smallest key is the one the recurrence
        keeps: it leaves out the latest item it can.
        """
        positions = []
        i = 0
        # members were appended in catalog order
        for member in group.items:
            while self.items[i] != member:
                i += 1
            positions.append(i)
            i += 1
        return tuple(reversed(positions))

    def solve_exact(self) -> Cell:
        """
        Best group with exactly `constraints.max_items` items.

        Returns INFEASIBLE when no such group fits the capacity. The value of
        cell(N, k, w) never drops as w grows, so the full-capacity column
        already holds the best over all budgets.
        """
        k = self.constraints.max_items
        if k is None:
            raise ConfigurationError("An exact-K query needs Constraints.max_items.")
        if k > len(self.items):
            return INFEASIBLE
        return self.lookup()(len(self.items), k, self.constraints.capacity)

    def _answer(self, lookup: Lookup) -> ItemGroup:
        n, capacity = len(self.items), self.constraints.capacity
        best = ItemGroup.empty()
        for k in range(1, self.max_items + 1):
            cell = lookup(n, k, capacity)
            if not is_feasible(cell):
                continue
            group: ItemGroup = cell  # type: ignore[assignment]
            if group.total_value > best.total_value:
                best = group
            elif group.total_value == best.total_value and (
                self._tie_order(group) < self._tie_order(best)
            ):
                best = group
        return best
