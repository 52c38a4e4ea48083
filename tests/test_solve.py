# -*- coding: utf-8 -*-
import logging

import pytest

from knapsack_dp import ConfigurationError, Item, Policy, ProblemState, solve_knapsack
from knapsack_dp.planning.solvers import CardinalityDPEngine, WeightDPEngine, build_engine, resolve_shape
from knapsack_dp.utils.read_jsons import read_problem_dir


def test_policy_defaults():
    p = Policy()
    assert (p.shape, p.strategy, p.dump_table, p.dump_metric) == ("auto", "recursive", False, "value")


@pytest.mark.parametrize(
    "kwargs",
    [{"shape": "by_volume"}, {"strategy": "threads"}, {"dump_metric": "ratio"}],
)
def test_policy_rejects_unknown_values(kwargs):
    with pytest.raises(ConfigurationError):
        Policy(**kwargs)


def test_auto_shape_follows_cardinality(kellerer_items):
    assert resolve_shape(ProblemState.build(kellerer_items, 9), Policy()) == "weight"
    assert resolve_shape(ProblemState.build(kellerer_items, 9, max_items=7), Policy()) == "weight_and_count"
    assert resolve_shape(ProblemState.build(kellerer_items, 9, max_items=3), Policy()) == "weight_and_count"
    assert isinstance(build_engine(ProblemState.build(kellerer_items, 9, max_items=3), Policy()), CardinalityDPEngine)
    assert isinstance(build_engine(ProblemState.build(kellerer_items, 9), Policy()), WeightDPEngine)


@pytest.mark.parametrize("shape", ["weight", "profit"])
def test_capacity_only_shapes_refuse_binding_max_items(kellerer_items, shape):
    state = ProblemState.build(kellerer_items, 9, max_items=2)
    with pytest.raises(ConfigurationError):
        solve_knapsack(state, Policy(shape=shape))


@pytest.mark.parametrize("shape", ["auto", "weight", "profit", "weight_and_count"])
@pytest.mark.parametrize("strategy", ["recursive", "iterative"])
def test_every_shape_solves_classic_instance(kellerer_items, shape, strategy):
    result = solve_knapsack(ProblemState.build(kellerer_items, 9), Policy(shape=shape, strategy=strategy))
    assert result.total_value == 15
    assert result.total_weight == 9
    assert result.optimal.member_names() == "a,d"
    assert result.strategy == strategy
    assert result.cells_computed > 0


def test_profit_shape_reports_its_bound(kellerer_items):
    result = solve_knapsack(ProblemState.build(kellerer_items, 9), Policy(shape="profit"))
    assert result.shape == "profit"
    assert result.profit_upper_bound == 16
    assert result.exact_k_feasible is None


def test_exact_k_reported_alongside_optimum(kellerer_items):
    result = solve_knapsack(ProblemState.build(kellerer_items, 9, max_items=3))
    assert result.shape == "weight_and_count"
    assert result.exact_k_feasible is True
    assert result.exact_k.member_names() == "a,b,g"
    assert result.exact_k.total_value == 14
    assert result.optimal.member_names() == "a,d"


def test_exact_k_infeasible_is_an_outcome(kellerer_items, caplog):
    caplog.set_level(logging.INFO, logger="knapsack_dp")
    result = solve_knapsack(ProblemState.build(kellerer_items, 8, max_items=3))
    assert result.exact_k_feasible is False
    assert result.exact_k is None
    assert result.total_value == 14
    assert "No subset of exactly 3 items fits capacity 8." in caplog.messages


def test_auto_reports_exact_k_for_a_limit_that_does_not_bind(kellerer_items, caplog):
    caplog.set_level(logging.INFO, logger="knapsack_dp")
    result = solve_knapsack(ProblemState.build(kellerer_items, 9, max_items=7))
    assert result.shape == "weight_and_count"
    # all seven weigh 36
    assert result.exact_k_feasible is False
    assert result.exact_k is None
    assert result.optimal.member_names() == "a,d"
    assert "No subset of exactly 7 items fits capacity 9." in caplog.messages

    whole = solve_knapsack(ProblemState.build(kellerer_items, 36, max_items=7))
    assert whole.exact_k_feasible is True
    assert whole.exact_k.count == 7
    assert whole.exact_k.total_value == 44


def test_answer_does_not_depend_on_a_slack_item_limit():
    items = [Item("a", 1, 5), Item("b", 1, 0), Item("z", 50, 1)]
    groups = [solve_knapsack(ProblemState.build(items, 2, max_items=k)).optimal for k in (2, 3, None)]
    assert [g.member_names() for g in groups] == ["a", "a", "a"]


def test_unbounded_has_no_exact_k(kellerer_items):
    result = solve_knapsack(ProblemState.build(kellerer_items, 9))
    assert result.exact_k is None
    assert result.exact_k_feasible is None


def test_explicit_cardinality_shape_reports_exact_k_when_not_binding(kellerer_items):
    state = ProblemState.build(kellerer_items, 30, max_items=7)
    result = solve_knapsack(state, Policy(shape="weight_and_count"))
    # all seven weigh 36
    assert result.exact_k_feasible is False
    assert result.total_value == solve_knapsack(ProblemState.build(kellerer_items, 30)).total_value


def test_base_cases():
    assert solve_knapsack(ProblemState.build([], 10)).total_value == 0
    items = [Item("a", 2, 6), Item("b", 3, 5)]
    assert solve_knapsack(ProblemState.build(items, 0)).total_value == 0
    zero_k = solve_knapsack(ProblemState.build(items, 10, max_items=0))
    assert zero_k.total_value == 0
    assert zero_k.optimal.count == 0


def test_duplicate_names_only_warn(caplog):
    caplog.set_level(logging.WARNING, logger="knapsack_dp")
    state = ProblemState.build([Item("a", 1, 1), Item("a", 2, 2)], 3)
    assert solve_knapsack(state).total_value == 3
    assert any("Duplicate item name" in m for m in caplog.messages)


def test_solve_logs_optimum(kellerer_items, caplog):
    caplog.set_level(logging.INFO, logger="knapsack_dp")
    solve_knapsack(ProblemState.build(kellerer_items, 9))
    assert "Optimal value solution: Items: a,d, Count: 2, Total weight: 9, Total value: 15" in caplog.messages


@pytest.mark.parametrize(
    "name, value, exact_value",
    [
        ("kellerer", 15, 14),
        ("multi_constraint", 17, 17),
        ("non_conforming", 217, 217),
        ("wikipedia", 1270, None),
    ],
)
def test_bundled_problems(problems_dir, brute_force, name, value, exact_value):
    state = read_problem_dir(str(problems_dir / name))
    c = state.constraints
    result = solve_knapsack(state)
    assert result.total_value == value
    assert value == brute_force(state.items, c.capacity, c.max_items)
    if exact_value is None:
        assert result.exact_k is None
    else:
        assert result.exact_k.total_value == exact_value


def test_wikipedia_profit_and_weight_shapes_agree(problems_dir):
    state = read_problem_dir(str(problems_dir / "wikipedia"))
    by_weight = solve_knapsack(state, Policy(shape="weight", strategy="iterative"))
    by_profit = solve_knapsack(state, Policy(shape="profit"))
    assert by_weight.optimal == by_profit.optimal
    assert by_weight.optimal.member_names() == "a,d,h"
