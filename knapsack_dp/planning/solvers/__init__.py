# -*- coding: utf-8 -*-
"""
DP engines, one per state-space shape, plus the solve orchestration.
"""

from .base import DPEngine
from .by_weight import WeightDPEngine
from .by_profit import ProfitDPEngine
from .by_weight_and_count import CardinalityDPEngine
from .dp import ENGINES, build_engine, resolve_shape, solve_knapsack

__all__ = [
    "DPEngine",
    "WeightDPEngine",
    "ProfitDPEngine",
    "CardinalityDPEngine",
    "ENGINES",
    "build_engine",
    "resolve_shape",
    "solve_knapsack",
]
