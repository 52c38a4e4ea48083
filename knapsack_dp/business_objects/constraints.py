# -*- coding: utf-8 -*-
"""
Constraint tuple for a single knapsack instance.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import StateValidationError
from .items import _is_int


@dataclass(frozen=True)
class Constraints:
    """
    Immutable problem constraints.

    Attributes
    ----------
    capacity : int
        Nonnegative limit on total selected weight.
    max_items : int | None
        Nonnegative limit on the number of selected items; None = unbounded.
    allow_repeats : bool
        Must be False: every item is chosen at most once.
    """
    capacity: int
    max_items: Optional[int] = None
    allow_repeats: bool = False

    def __post_init__(self) -> None:  # type: ignore[override]
        if not _is_int(self.capacity):
            raise StateValidationError(f"Constraints.capacity must be an integer, got {self.capacity!r}.")
        if self.capacity < 0:
            raise StateValidationError("Constraints.capacity must be >= 0.")
        if self.max_items is not None:
            if not _is_int(self.max_items):
                raise StateValidationError(f"Constraints.max_items must be an integer or None, got {self.max_items!r}.")
            if self.max_items < 0:
                raise StateValidationError("Constraints.max_items must be >= 0.")
        if self.allow_repeats:
            raise StateValidationError("Repeated items are not supported (0/1 knapsack only).")

    @property
    def is_unbounded(self) -> bool:
        return self.max_items is None

    def item_limit(self, n_items: int) -> int:
        """Effective cardinality ceiling for a catalog of `n_items` items."""
        if self.max_items is None:
            return n_items
        return min(self.max_items, n_items)

    def is_cardinality_binding(self, n_items: int) -> bool:
        """True when max_items actually restricts a catalog of this size."""
        return self.max_items is not None and self.max_items < n_items
