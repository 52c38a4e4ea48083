# -*- coding: utf-8 -*-
"""
Solution models for knapsack DP results.

`ItemGroup` is the value stored in every memo cell: a subset of items with
cached totals. It is immutable; `extend` returns a new group, so a group
stored in the memo table can be shared by any number of other cells.

`KnapsackResult` is the shape of the output consumed by the reporting layer.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from knapsack_dp.business_objects.items import Item


@dataclass(frozen=True)
class ItemGroup:
    """
    A subset of selected items and its derived totals.

    Attributes
    ----------
    items : tuple[Item, ...]
        Selected items in the order they were added.
    total_weight : int
        Sum of item weights.
    total_value : int
        Sum of item values.
    count : int
        Number of selected items.
    """
    items: Tuple[Item, ...] = ()
    total_weight: int = 0
    total_value: int = 0
    count: int = 0

    @classmethod
    def empty(cls) -> "ItemGroup":
        return cls()

    @classmethod
    def of(cls, items: Iterable[Item]) -> "ItemGroup":
        """Build a group from scratch, computing the totals."""
        items = tuple(items)
        return cls(
            items=items,
            total_weight=sum(it.weight for it in items),
            total_value=sum(it.value for it in items),
            count=len(items),
        )

    def extend(self, item: Item) -> "ItemGroup":
        """Return a new group with `item` appended; self is left unchanged."""
        return ItemGroup(
            items=self.items + (item,),
            total_weight=self.total_weight + item.weight,
            total_value=self.total_value + item.value,
            count=self.count + 1,
        )

    def member_names(self) -> str:
        return ",".join(it.name for it in self.items)

    def describe(self) -> str:
        return (
            f"Items: {self.member_names() or '-'}, Count: {self.count}, "
            f"Total weight: {self.total_weight}, Total value: {self.total_value}"
        )


@dataclass(frozen=True)
class KnapsackResult:
    """
    Outcome of a full DP run.

    Attributes
    ----------
    optimal : ItemGroup
        Best subset within capacity and (if bounded) at most max_items items.
    shape : str
        DP shape actually used ("weight", "profit" or "weight_and_count").
    strategy : str
        "recursive" or "iterative".
    exact_k : ItemGroup | None
        Best subset with exactly max_items items; None when not requested
        or infeasible.
    exact_k_feasible : bool | None
        Outcome of the exact-K pre-check; None when no exact-K query applies.
    profit_upper_bound : int | None
        Size of the profit axis (profit shape only).
    cells_computed : int
        Number of memo cells evaluated.
    """
    optimal: ItemGroup
    shape: str
    strategy: str
    exact_k: Optional[ItemGroup] = None
    exact_k_feasible: Optional[bool] = None
    profit_upper_bound: Optional[int] = None
    cells_computed: int = 0

    @property
    def total_value(self) -> int:
        return self.optimal.total_value

    @property
    def total_weight(self) -> int:
        return self.optimal.total_weight
