# -*- coding: utf-8 -*-
"""
Item model for the 0/1 knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


def _is_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class Item:
    """
    An item that can be selected at most once.

    Attributes
    ----------
    name : str
        Display name. Expected to be unique within a catalog for reporting,
        the DP itself does not rely on it.
    weight : int
        Nonnegative weight (capacity consumption).
    value : int
        Nonnegative objective contribution if selected.
    """
    name: str
    weight: int
    value: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.name:
            raise StateValidationError("Item.name must be non-empty.")
        if not _is_int(self.weight):
            raise StateValidationError(f"Item[{self.name}] weight must be an integer, got {self.weight!r}.")
        if not _is_int(self.value):
            raise StateValidationError(f"Item[{self.name}] value must be an integer, got {self.value!r}.")
        if self.weight < 0:
            raise StateValidationError(f"Item[{self.name}] weight must be >= 0.")
        if self.value < 0:
            raise StateValidationError(f"Item[{self.name}] value must be >= 0.")

    def ratio(self) -> float:
        """
        Value per unit weight.

        Zero-weight items rank first when they carry value (+inf) and
        get 0.0 when they carry none.
        """
        if self.weight == 0:
            return float("inf") if self.value > 0 else 0.0
        return self.value / self.weight
