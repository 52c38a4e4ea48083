# -*- coding: utf-8 -*-
from __future__ import annotations
import itertools
import random
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

from knapsack_dp.business_objects.items import Item

PROBLEMS_DIR = Path(__file__).resolve().parents[1] / "problems"


def _kellerer() -> List[Item]:
    return [
        Item("a", 2, 6),
        Item("b", 3, 5),
        Item("c", 6, 8),
        Item("d", 7, 9),
        Item("e", 5, 6),
        Item("f", 9, 7),
        Item("g", 4, 3),
    ]


@pytest.fixture
def kellerer_items() -> List[Item]:
    return _kellerer()


@pytest.fixture
def problems_dir() -> Path:
    return PROBLEMS_DIR


def brute_force_value(
    items: Sequence[Item],
    capacity: int,
    max_items: Optional[int] = None,
    exact: bool = False,
) -> Optional[int]:
    """Best value over all subsets; None when no subset qualifies (exact mode)."""
    limit = len(items) if max_items is None else min(max_items, len(items))
    counts = [max_items] if exact else range(limit + 1)
    best: Optional[int] = None
    for k in counts:
        if k is None or k > len(items):
            continue
        for combo in itertools.combinations(items, k):
            if sum(it.weight for it in combo) <= capacity:
                v = sum(it.value for it in combo)
                if best is None or v > best:
                    best = v
    return best


@pytest.fixture
def brute_force() -> Callable[..., Optional[int]]:
    return brute_force_value


def random_catalog(seed: int, max_n: int = 8) -> List[Item]:
    rng = random.Random(seed)
    n = rng.randint(0, max_n)
    return [Item(f"i{j}", rng.randint(0, 10), rng.randint(0, 20)) for j in range(n)]


@pytest.fixture
def catalog_factory() -> Callable[[int], List[Item]]:
    return random_catalog
