# -*- coding: utf-8 -*-
"""
Shared driver for the DP engines.

An engine owns one MemoTable for one problem run and evaluates a recurrence
over integer-tuple keys, either:
  - top-down ("recursive"): `cell(*key)` computes missing sub-cells on demand
    and stores each exactly once, or
  - bottom-up ("iterative"): `fill()` walks the whole grid returned by
    `axes()` in dependency order (first axis = items considered, slowest).

Subclasses implement `_base_case`, `_recurrence` and `_answer`. The
recurrence reads sub-cells through a `lookup` callable, which is `cell` in
top-down mode and a strict table read in bottom-up mode, so both modes run
the same transition code and produce identical cells.

Tie-break (all shapes): the candidate that includes the current item only
replaces the one that excludes it when strictly better.
"""

from __future__ import annotations
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from knapsack_dp.business_objects.errors import ConfigurationError
from knapsack_dp.planning.memo import Cell, Key, MemoTable, is_feasible
from knapsack_dp.planning.policy import STRATEGIES
from knapsack_dp.planning.solution import ItemGroup
from knapsack_dp.planning.state import ProblemState

logger = logging.getLogger(__name__)

Lookup = Callable[..., Cell]
Better = Callable[[ItemGroup, ItemGroup], bool]


def more_value(candidate: ItemGroup, incumbent: ItemGroup) -> bool:
    return candidate.total_value > incumbent.total_value


def less_weight(candidate: ItemGroup, incumbent: ItemGroup) -> bool:
    return candidate.total_weight < incumbent.total_weight


def prefer(excluded: Cell, included: Cell, better: Better) -> Cell:
    """Pick between the exclude/include candidates; exclusion wins ties."""
    if not is_feasible(included):
        return excluded
    if not is_feasible(excluded):
        return included
    return included if better(included, excluded) else excluded  # type: ignore[arg-type]


class DPEngine(ABC):
    """Memoized DP over one state-space shape."""

    shape: str = ""

    def __init__(self, state: ProblemState, strategy: str = "recursive") -> None:
        if strategy not in STRATEGIES:
            raise ConfigurationError(f"Unknown strategy {strategy!r}; expected one of {STRATEGIES}.")
        self.state = state
        self.items = state.items
        self.constraints = state.constraints
        self.strategy = strategy
        self.table = MemoTable()
        self._filled = False

    # -----------------------------
    # Shape definition
    # -----------------------------
    @abstractmethod
    def axes(self) -> Tuple[range, ...]:
        """Index ranges of the full table, first axis = items considered."""

    @abstractmethod
    def _base_case(self, key: Key) -> Optional[Cell]:
        """Cell for a base-case key, or None when the recurrence applies."""

    @abstractmethod
    def _recurrence(self, key: Key, lookup: Lookup) -> Cell:
        """Combine sub-cells (read via `lookup`) into the cell at `key`."""

    @abstractmethod
    def _answer(self, lookup: Lookup) -> ItemGroup:
        """Read the optimal group out of the table."""

    # -----------------------------
    # Evaluation
    # -----------------------------
    def cell(self, *key: int) -> Cell:
        """Top-down evaluation of one cell, computing sub-cells as needed."""
        if key in self.table:
            return self.table[key]
        value = self._base_case(key)
        if value is None:
            value = self._recurrence(key, self.cell)
        return self._store(key, value)

    def fill(self) -> None:
        """Bottom-up evaluation of every cell in `axes()`."""
        if self._filled:
            return
        for key in itertools.product(*self.axes()):
            if key in self.table:
                continue
            value = self._base_case(key)
            if value is None:
                value = self._recurrence(key, self._read)
            self._store(key, value)
        self._filled = True

    def _read(self, *key: int) -> Cell:
        # Bottom-up order guarantees dependencies are present.
        return self.table[key]

    def _store(self, key: Key, value: Cell) -> Cell:
        logger.debug("%s%s -> %r", self.shape, key, value)
        return self.table.store(key, value)

    def lookup(self) -> Lookup:
        """Cell accessor for the configured strategy."""
        if self.strategy == "iterative":
            self.fill()
            return self._read
        return self.cell

    def solve(self) -> ItemGroup:
        best = self._answer(self.lookup())
        logger.info(
            "%s/%s: %d cells computed; %s",
            self.shape, self.strategy, self.table.cells_computed, best.describe(),
        )
        return best
