"""Formatting of BatchData responses into tool output text.

Search responses are not validated against a local model. To report a count,
the response is classified into one of three shapes:

- CountBearing: carries a numeric `totalCount` or `total`
- ListBearing: carries a `properties` list
- Bare: anything else, which counts as zero
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

COUNT_KEYS = ("totalCount", "total")


@dataclass(frozen=True)
class CountBearing:
    total: int | float


@dataclass(frozen=True)
class ListBearing:
    items: list


@dataclass(frozen=True)
class Bare:
    pass


ResponseShape = Union[CountBearing, ListBearing, Bare]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_response(response: Any) -> ResponseShape:
    """Pick the first count source present: totalCount, then total, then properties."""
    if not isinstance(response, dict):
        return Bare()
    for key in COUNT_KEYS:
        if _is_number(response.get(key)):
            return CountBearing(response[key])
    properties = response.get("properties")
    if isinstance(properties, list):
        return ListBearing(properties)
    return Bare()


def total_count(response: Any) -> int | float:
    shape = classify_response(response)
    if isinstance(shape, CountBearing):
        # 3.0 -> 3
        if isinstance(shape.total, float) and shape.total.is_integer():
            return int(shape.total)
        return shape.total
    if isinstance(shape, ListBearing):
        return len(shape.items)
    return 0


def pretty_json(response: Any) -> str:
    return json.dumps(response, indent=2, ensure_ascii=False)


def format_search_result(response: Any) -> str:
    return f"Found {total_count(response)} properties matching criteria:\n\n{pretty_json(response)}"


def format_boundary_result(response: Any) -> str:
    return f"Found {total_count(response)} properties in specified boundary:\n\n{pretty_json(response)}"


def format_count_result(response: Any) -> str:
    return f"Total properties matching criteria: {total_count(response)}"
