#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solve one bundled problem instance with the knapsack DP and export artifacts.

This version does NOT use argparse.
Just set the variables at the top of the file and run from the repo root:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - selection.csv          (optimal group members)
  - exact_k_selection.csv  (exactly-max_items group, when one exists)
  - problem_summary.csv    (global KPIs)
  - memo_table.txt         (memo table grid, if DUMP_TABLE)
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
PROBLEM_DIR = "problems/kellerer"
OUT_DIR = "reports/kellerer"

# "auto" | "weight" | "profit" | "weight_and_count"
SHAPE = "auto"
# "recursive" | "iterative"
STRATEGY = "recursive"

DUMP_TABLE = True
DUMP_METRIC = "value"     # "value" | "weight" | "count"

LOG_FILE = "KnapsackLog.txt"   # set to None for console only
# ============================

from knapsack_dp.config import setup_logging
from knapsack_dp.planning import Policy, KnapsackResult
from knapsack_dp.planning.solvers import solve_knapsack
from knapsack_dp.planning.tracker import Tracker
from knapsack_dp.utils.read_jsons import read_problem_dir


def main() -> None:
    setup_logging(log_file=LOG_FILE)

    # Load problem
    state = read_problem_dir(PROBLEM_DIR)

    policy = Policy(
        shape=SHAPE,
        strategy=STRATEGY,
        dump_table=DUMP_TABLE,
        dump_metric=DUMP_METRIC,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    result: KnapsackResult = solve_knapsack(state, policy, tracker=tracker)

    c = state.constraints
    print(f"\n=== Knapsack DP ({result.shape}/{result.strategy}) on {PROBLEM_DIR} ===")
    print(f"Capacity: {c.capacity}, max items: {'unbounded' if c.max_items is None else c.max_items}")
    if result.exact_k_feasible is not None:
        if result.exact_k is not None:
            print(f"Solution exists for exactly {c.max_items} items:")
            print(f"  {result.exact_k.describe()}")
        else:
            print(f"No solution with exactly {c.max_items} items fits the capacity.")
    print("Optimal value solution:")
    print(f"  {result.optimal.describe()}")

    print(f"\nArtifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
