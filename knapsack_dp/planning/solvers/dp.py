# -*- coding: utf-8 -*-
"""
End-to-end DP solve: pick the engine shape, run it, gather the result.

Pipeline:
  1) Resolve the shape from Policy.shape and the constraints
        - "auto": "weight_and_count" whenever max_items is set, else "weight"
        - "weight"/"profit" cannot honour a binding max_items
  2) Build one engine (one memo table) and solve for the optimum
  3) Cardinality shape with max_items set (even one that does not bind):
     run the exact-K pre-check, and if it passes read the exact-K group
     from the same table
  4) Optionally write artifacts via Tracker

Return:
  - KnapsackResult with the optimal group (and the exact-K group, if any).
"""

from __future__ import annotations
import logging
from typing import Dict, Optional, Type

from knapsack_dp.business_objects.errors import ConfigurationError
from knapsack_dp.heuristics.bounds import exact_k_feasible
from knapsack_dp.planning.memo import is_feasible
from knapsack_dp.planning.policy import Policy
from knapsack_dp.planning.solution import ItemGroup, KnapsackResult
from knapsack_dp.planning.state import ProblemState
from knapsack_dp.planning.tracker import Tracker
from .base import DPEngine
from .by_profit import ProfitDPEngine
from .by_weight import WeightDPEngine
from .by_weight_and_count import CardinalityDPEngine

logger = logging.getLogger(__name__)

ENGINES: Dict[str, Type[DPEngine]] = {
    "weight": WeightDPEngine,
    "profit": ProfitDPEngine,
    "weight_and_count": CardinalityDPEngine,
}


def resolve_shape(state: ProblemState, policy: Policy) -> str:
    binding = state.constraints.is_cardinality_binding(state.n_items)
    if policy.shape == "auto":
        return "weight" if state.constraints.max_items is None else "weight_and_count"
    if binding and policy.shape != "weight_and_count":
        raise ConfigurationError(
            f"Shape {policy.shape!r} ignores max_items={state.constraints.max_items}; "
            f"use 'weight_and_count' or 'auto'."
        )
    return policy.shape


def build_engine(state: ProblemState, policy: Policy) -> DPEngine:
    shape = resolve_shape(state, policy)
    return ENGINES[shape](state, strategy=policy.strategy)


def solve_knapsack(
    state: ProblemState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> KnapsackResult:
    """
    Solve one knapsack instance.

    Parameters
    ----------
    state : ProblemState
        Item catalog + constraints.
    policy : Policy | None
        Shape/strategy knobs; defaults to Policy().
    tracker : Tracker | None
        If provided, writes selection/summary CSVs (and the memo table when
        policy.dump_table is set) into tracker.out_dir.

    Returns
    -------
    KnapsackResult
        `exact_k` and `exact_k_feasible` are filled in only when the
        cardinality shape runs with max_items set, which "auto" always does
        in that case. An explicit "weight" or "profit" shape with a
        non-binding max_items leaves both as None.
    """
    if policy is None:
        policy = Policy()

    engine = build_engine(state, policy)
    c = state.constraints
    logger.info(
        "Solving %d items, capacity %d, max_items %s with shape=%s strategy=%s",
        state.n_items, c.capacity, c.max_items, engine.shape, engine.strategy,
    )

    optimal = engine.solve()

    exact_group: Optional[ItemGroup] = None
    exact_ok: Optional[bool] = None
    if isinstance(engine, CardinalityDPEngine) and c.max_items is not None:
        exact_ok = exact_k_feasible(state.items, c)
        if exact_ok:
            cell = engine.solve_exact()
            if is_feasible(cell):
                exact_group = cell  # type: ignore[assignment]
                logger.info("Solution exists for exactly %d items: %s", c.max_items, exact_group.describe())
        else:
            logger.info("No subset of exactly %d items fits capacity %d.", c.max_items, c.capacity)

    result = KnapsackResult(
        optimal=optimal,
        shape=engine.shape,
        strategy=engine.strategy,
        exact_k=exact_group,
        exact_k_feasible=exact_ok,
        profit_upper_bound=getattr(engine, "upper_bound", None),
        cells_computed=engine.table.cells_computed,
    )
    logger.info("Optimal value solution: %s", optimal.describe())

    if tracker is not None:
        tracker.write_selection_csv(optimal)
        if exact_group is not None:
            tracker.write_selection_csv(exact_group, filename="exact_k_selection.csv")
        tracker.write_problem_summary_csv(state, result)
        if policy.dump_table:
            tracker.write_memo_table(engine, metric=policy.dump_metric)

    return result
