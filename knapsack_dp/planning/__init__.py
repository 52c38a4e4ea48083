# -*- coding: utf-8 -*-
"""
Planning layer public API for the knapsack DP.

This module exposes the core planning-time data contracts:
  - State model (ProblemState)
  - Policy configuration
  - ItemGroup and KnapsackResult models
  - MemoTable and the INFEASIBLE marker

Solvers and the tracker are intentionally not exported here to avoid
import cycles; import them from `knapsack_dp.planning.solvers` and
`knapsack_dp.planning.tracker`.
"""

from .state import ProblemState
from .policy import Policy
from .solution import ItemGroup, KnapsackResult
from .memo import MemoTable, INFEASIBLE, is_feasible

__all__ = [
    "ProblemState",
    "Policy",
    "ItemGroup",
    "KnapsackResult",
    "MemoTable",
    "INFEASIBLE",
    "is_feasible",
]
