# -*- coding: utf-8 -*-
"""
Bounded-cardinality 0/1 knapsack solved by dynamic programming.

Typical use:

    from knapsack_dp import Item, ProblemState, Policy, solve_knapsack

    state = ProblemState.build([Item("a", 2, 6), Item("d", 7, 9)], capacity=9)
    result = solve_knapsack(state, Policy(shape="profit"))
"""

from .business_objects import Item, Constraints, SchemaError, StateValidationError, ConfigurationError
from .planning import ProblemState, Policy, ItemGroup, KnapsackResult, INFEASIBLE
from .planning.solvers import solve_knapsack

__all__ = [
    "Item",
    "Constraints",
    "SchemaError",
    "StateValidationError",
    "ConfigurationError",
    "ProblemState",
    "Policy",
    "ItemGroup",
    "KnapsackResult",
    "INFEASIBLE",
    "solve_knapsack",
]

__version__ = "0.1.0"
