# -*- coding: utf-8 -*-
"""
I/O helpers for loading knapsack problem definitions.

This module includes lightweight JSON readers that match the
`problems/<name>/{items.json, constraints.json}` structure.

JSON formats:
- items.json       : [{"name": "...", "weight": <int>, "value": <int>}, ...]
- constraints.json : {"capacity": <int>, "max_items": <int|null>, "allow_repeats": <bool>}
                     (max_items and allow_repeats are optional)

These map directly to:
- business_objects.items.Item
- business_objects.constraints.Constraints
"""

from __future__ import annotations
import json
import os
from typing import Any, List

from knapsack_dp.business_objects.errors import SchemaError
from knapsack_dp.business_objects.items import Item
from knapsack_dp.business_objects.constraints import Constraints
from knapsack_dp.planning.state import ProblemState

ITEMS_FILENAME = "items.json"
CONSTRAINTS_FILENAME = "constraints.json"


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _as_int(raw: object, key: str) -> int:
    # JSON numbers like 3.0 are accepted, 3.5 and "3" are not.
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaError(f"'{key}' must be an integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise SchemaError(f"'{key}' must be an integer, got {raw!r}")
    return int(raw)


def _load(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except Exception as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - name (str)
      - weight (integer)
      - value (integer)
    """
    data = _load(path)
    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            name = str(_require(obj, "name", path))
            weight = _as_int(_require(obj, "weight", path), "weight")
            value = _as_int(_require(obj, "value", path), "value")
            items.append(Item(name=name, weight=weight, value=value))
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items


def read_constraints_json(path: str) -> Constraints:
    """
    Load constraints from a JSON object with:
      - capacity (integer)
      - max_items (integer or null; optional, null = unbounded)
      - allow_repeats (bool; optional, must be false)
    """
    data = _load(path)
    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")
    try:
        capacity = _as_int(_require(data, "capacity", path), "capacity")
        raw_max = data.get("max_items")
        max_items = None if raw_max is None else _as_int(raw_max, "max_items")
        allow_repeats = bool(data.get("allow_repeats", False))
        return Constraints(capacity=capacity, max_items=max_items, allow_repeats=allow_repeats)
    except ValueError as e:
        raise SchemaError(f"{path}: {e}") from e


def read_problem_dir(path: str) -> ProblemState:
    """Load `items.json` + `constraints.json` from a problem folder."""
    items = read_items_json(os.path.join(path, ITEMS_FILENAME))
    constraints = read_constraints_json(os.path.join(path, CONSTRAINTS_FILENAME))
    return ProblemState(items=tuple(items), constraints=constraints)
