# -*- coding: utf-8 -*-
"""
Greedy estimates used to size and gate the DP.
"""

from .bounds import (
    sort_by_ratio,
    greedy_two_approximation,
    lp_relaxation_approximation,
    profit_upper_bound,
    lightest_k_weight,
    exact_k_feasible,
)

__all__ = [
    "sort_by_ratio",
    "greedy_two_approximation",
    "lp_relaxation_approximation",
    "profit_upper_bound",
    "lightest_k_weight",
    "exact_k_feasible",
]
