# -*- coding: utf-8 -*-
"""
Bound estimation for the 0/1 knapsack.

Greedy fill by value/weight ratio, used to size the profit axis of the
profit-indexed DP table:

  - greedy_two_approximation: fill until the critical item, then keep the
    better of (filled group, critical item alone). Doubling it bounds the
    optimum from above.
  - lp_relaxation_approximation: same fill, plus the fraction of the critical
    item that exactly uses the remaining capacity (Dantzig bound).
  - profit_upper_bound: floor of the LP relaxation.

The cardinality pre-check for exact-K queries lives here as well, since it
is the same kind of cheap sort-and-sum estimate.

All functions are pure: no mutation, no I/O besides logging.
"""

from __future__ import annotations
import logging
import math
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

from knapsack_dp.business_objects.items import Item
from knapsack_dp.business_objects.constraints import Constraints

logger = logging.getLogger(__name__)


def sort_by_ratio(items: Sequence[Item]) -> List[Item]:
    """Stable sort by value/weight, highest first."""
    return sorted(items, key=lambda it: it.ratio(), reverse=True)


def _greedy_fill(items: Sequence[Item], capacity: int) -> Tuple[int, int, Optional[Item]]:
    """
    Walk the ratio-sorted items while they fit.

    Returns (filled_weight, filled_value, critical_item); critical_item is
    None when every item fits.
    """
    weight = 0
    value = 0
    for it in sort_by_ratio(items):
        if weight + it.weight <= capacity:
            weight += it.weight
            value += it.value
        else:
            return weight, value, it
    return weight, value, None


def greedy_two_approximation(items: Sequence[Item], constraints: Constraints) -> int:
    """
    Conventional 2-approximation for the capacity-only problem.

    Result r satisfies z* <= 2r, where z* is the optimal value.
    """
    _, value, critical = _greedy_fill(items, constraints.capacity)
    if critical is not None and critical.value > value:
        return critical.value
    return value


def _lp_relaxation(items: Sequence[Item], capacity: int) -> Fraction:
    weight, value, critical = _greedy_fill(items, capacity)
    bound = Fraction(value)
    if critical is not None:
        # critical.weight > 0 here: a zero-weight item always fits
        bound += Fraction(critical.value * (capacity - weight), critical.weight)
    return bound


def lp_relaxation_approximation(items: Sequence[Item], constraints: Constraints) -> float:
    """Value of the fractional (LP) relaxation; never below the integral optimum."""
    return float(_lp_relaxation(items, constraints.capacity))


def profit_upper_bound(items: Sequence[Item], constraints: Constraints) -> int:
    """
    Integer upper bound on the achievable value.

    Floors the LP relaxation computed in exact arithmetic, so a relaxation
    that is integral is not rounded down by float error.
    """
    if not items:
        return 0

    two_approx = greedy_two_approximation(items, constraints)
    lp = _lp_relaxation(items, constraints.capacity)
    bound = math.floor(lp)

    logger.info("Conventional 2-approx value: %d, UB: %d", two_approx, 2 * two_approx)
    logger.info("LP approx value: %.4f, UB: %d", float(lp), bound)
    return bound


def lightest_k_weight(items: Sequence[Item], k: int) -> Optional[int]:
    """Total weight of the `k` lightest items, or None if there are fewer than k."""
    if k > len(items):
        return None
    return sum(sorted(it.weight for it in items)[:k])


def exact_k_feasible(items: Sequence[Item], constraints: Constraints) -> bool:
    """
    Whether some subset of exactly max_items items fits the capacity.

    The cheapest such subset is the max_items lightest items.
    """
    if constraints.max_items is None:
        return True
    min_weight = lightest_k_weight(items, constraints.max_items)
    return min_weight is not None and min_weight <= constraints.capacity
