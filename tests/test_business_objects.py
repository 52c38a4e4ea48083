# -*- coding: utf-8 -*-
import math

import pytest

from knapsack_dp.business_objects import Constraints, Item, StateValidationError


def test_item_accepts_zero_weight_and_value():
    it = Item("z", 0, 0)
    assert it.weight == 0 and it.value == 0
    assert it.ratio() == 0.0


def test_item_ratio():
    assert Item("a", 2, 6).ratio() == 3.0
    assert math.isinf(Item("free", 0, 4).ratio())


@pytest.mark.parametrize(
    "name, weight, value",
    [
        ("", 1, 1),
        ("neg-w", -1, 1),
        ("neg-v", 1, -1),
        ("float-w", 1.5, 1),
        ("str-v", 1, "3"),
        ("bool-w", True, 1),
    ],
)
def test_item_rejects_invalid_fields(name, weight, value):
    with pytest.raises(StateValidationError):
        Item(name, weight, value)


def test_item_is_immutable():
    it = Item("a", 2, 6)
    with pytest.raises(AttributeError):
        it.weight = 3  # type: ignore[misc]


def test_constraints_defaults_to_unbounded():
    c = Constraints(capacity=9)
    assert c.is_unbounded
    assert c.item_limit(7) == 7
    assert not c.is_cardinality_binding(7)


def test_constraints_item_limit_and_binding():
    c = Constraints(capacity=9, max_items=3)
    assert c.item_limit(7) == 3
    assert c.item_limit(2) == 2
    assert c.is_cardinality_binding(7)
    assert not c.is_cardinality_binding(3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capacity": -1},
        {"capacity": 2.0},
        {"capacity": 5, "max_items": -1},
        {"capacity": 5, "max_items": 1.5},
        {"capacity": 5, "allow_repeats": True},
    ],
)
def test_constraints_rejects_invalid(kwargs):
    with pytest.raises(StateValidationError):
        Constraints(**kwargs)
