# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the knapsack DP.

State-space shape:
  - shape: "auto" | "weight" | "profit" | "weight_and_count"
      * "weight"            key (n, w): best value within weight budget w
      * "profit"            key (n, p): least weight reaching value exactly p
      * "weight_and_count"  key (n, k, w): best value choosing exactly k items
      * "auto"              "weight_and_count" whenever max_items is set,
                            else "weight"

Evaluation order:
  - strategy: "recursive" (top-down, memoized) | "iterative" (bottom-up)

Diagnostics:
  - dump_table: write the memo table next to the other artifacts
  - dump_metric: "value" | "weight" | "count" shown per cell in the dump
"""

from __future__ import annotations
from dataclasses import dataclass

from knapsack_dp.business_objects.errors import ConfigurationError

SHAPES = ("auto", "weight", "profit", "weight_and_count")
STRATEGIES = ("recursive", "iterative")
DUMP_METRICS = ("value", "weight", "count")


@dataclass(frozen=True)
class Policy:
    """
    Solver knobs (pure data holder).

    Attributes
    ----------
    shape : str
        DP state-space shape, see module docstring.
    strategy : str
        "recursive" or "iterative"; both give identical results.
    dump_table : bool
        If True and a Tracker is given, the memo table is written as text.
    dump_metric : str
        Per-cell metric printed in the dump.
    """
    shape: str = "auto"
    strategy: str = "recursive"

    # Diagnostics
    dump_table: bool = False
    dump_metric: str = "value"

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.shape not in SHAPES:
            raise ConfigurationError(f"Unknown shape {self.shape!r}; expected one of {SHAPES}.")
        if self.strategy not in STRATEGIES:
            raise ConfigurationError(f"Unknown strategy {self.strategy!r}; expected one of {STRATEGIES}.")
        if self.dump_metric not in DUMP_METRICS:
            raise ConfigurationError(f"Unknown dump_metric {self.dump_metric!r}; expected one of {DUMP_METRICS}.")
