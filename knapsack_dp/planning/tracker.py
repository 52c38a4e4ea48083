# -*- coding: utf-8 -*-
"""
Planning tracker: artifacts for a DP run.

Files produced (when Tracker is used):
  - selection.csv          (members of the optimal group)
  - exact_k_selection.csv  (members of the exact-K group, when one exists)
  - problem_summary.csv    (global KPIs)
  - memo_table.txt         (text grid of the memo table; optional)

Notes
-----
- Callers decide when to invoke these writers; solve_knapsack calls them at
  the end of a run.
- Memo grid legend: `x` = not computed, `-` = infeasible.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from knapsack_dp.planning.memo import INFEASIBLE, Cell
from knapsack_dp.planning.solution import ItemGroup, KnapsackResult
from knapsack_dp.planning.state import ProblemState

if TYPE_CHECKING:
    from knapsack_dp.planning.solvers.base import DPEngine


def _cell_text(cell: Optional[Cell], metric: str) -> str:
    if cell is None:
        return "    x"
    if cell is INFEASIBLE:
        return "    -"
    group: ItemGroup = cell  # type: ignore[assignment]
    if metric == "weight":
        v = group.total_weight
    elif metric == "count":
        v = group.count
    else:
        v = group.total_value
    return f" {v:4d}"


def _grid_lines(engine: "DPEngine", prefix: Sequence[int], rows: range, cols: range, metric: str) -> List[str]:
    lines = ["  |" + "".join(f" {j:4d}" for j in cols) + "|"]
    for i in rows:
        cells = "".join(_cell_text(engine.table.get((*prefix, i, j)), metric) for j in cols)
        lines.append(f"{i:2d}[{cells}]")
    return lines


def render_memo_table(engine: "DPEngine", metric: str = "value") -> str:
    """
    Render the memo table of `engine` as text.

    2-D shapes: rows = items considered, columns = weight (or profit).
    3-D shape: one block per items considered; rows = items chosen,
    columns = weight.
    """
    axes = engine.axes()
    if len(axes) == 2:
        lines = _grid_lines(engine, (), axes[0], axes[1], metric)
    else:
        lines = []
        for n in axes[0]:
            lines.append(f"After considering {n} items:")
            lines.extend(_grid_lines(engine, (n,), axes[1], axes[2], metric))
            lines.append("")
    return "\n".join(lines) + "\n"


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(self, group: ItemGroup, filename: str = "selection.csv") -> str:
        """
        Persist the members of a group.

        Columns:
          order_index, name, weight, value, ratio
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "name", "weight", "value", "ratio"])
            for idx, it in enumerate(group.items):
                w.writerow([idx, it.name, it.weight, it.value, it.ratio()])
        return path

    def write_problem_summary_csv(
        self,
        state: ProblemState,
        result: KnapsackResult,
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Persist global KPIs as metric,value rows.
        """
        c = state.constraints
        opt = result.optimal
        utilization = (opt.total_weight / c.capacity) if c.capacity > 0 else 0.0
        rows = [
            ("n_items", state.n_items),
            ("capacity", c.capacity),
            ("max_items", "" if c.max_items is None else c.max_items),
            ("shape", result.shape),
            ("strategy", result.strategy),
            ("profit_upper_bound", "" if result.profit_upper_bound is None else result.profit_upper_bound),
            ("cells_computed", result.cells_computed),
            ("total_value", opt.total_value),
            ("total_weight", opt.total_weight),
            ("item_count", opt.count),
            ("item_names", opt.member_names()),
            ("capacity_utilization", f"{utilization:.6f}"),
            ("exact_k_feasible", "" if result.exact_k_feasible is None else result.exact_k_feasible),
            ("exact_k_value", "" if result.exact_k is None else result.exact_k.total_value),
        ]
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["metric", "value"])
            w.writerows(rows)
        return path

    def write_memo_table(self, engine: "DPEngine", metric: str = "value", filename: str = "memo_table.txt") -> str:
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"# shape={engine.shape} strategy={engine.strategy} metric={metric}\n")
            f.write(render_memo_table(engine, metric=metric))
        return path
