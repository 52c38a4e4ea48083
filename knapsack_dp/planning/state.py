# -*- coding: utf-8 -*-
"""
Immutable problem input for a single DP run.

Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.constraints.Constraints
`ProblemState` bundles them into the snapshot handed to a solver.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from knapsack_dp.business_objects.errors import StateValidationError
from knapsack_dp.business_objects.items import Item
from knapsack_dp.business_objects.constraints import Constraints

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProblemState:
    """
    Immutable problem input.

    Attributes
    ----------
    items : tuple[Item, ...]
        The item catalog, in the order the DP considers it.
    constraints : Constraints
        Capacity and cardinality limits.
    """
    items: Tuple[Item, ...]
    constraints: Constraints

    def __post_init__(self) -> None:  # type: ignore[override]
        # Accept any sequence but store the catalog as a tuple.
        object.__setattr__(self, "items", tuple(self.items))

        for it in self.items:
            if not isinstance(it, Item):
                raise StateValidationError(f"Catalog entries must be Item, got {type(it).__name__}.")
        if not isinstance(self.constraints, Constraints):
            raise StateValidationError("ProblemState.constraints must be a Constraints instance.")

        seen: set[str] = set()
        for it in self.items:
            if it.name in seen:
                logger.warning("Duplicate item name %r; reports will be ambiguous.", it.name)
            seen.add(it.name)

    @classmethod
    def build(cls, items: Sequence[Item], capacity: int, max_items: int | None = None) -> "ProblemState":
        return cls(items=tuple(items), constraints=Constraints(capacity=capacity, max_items=max_items))

    @property
    def n_items(self) -> int:
        return len(self.items)
