"""Normalize query text and turn parsed conditions back into text."""

from __future__ import annotations

import math
from collections.abc import Iterable

from screenq.core.types import Condition
from screenq.query.parser import CONJUNCTION, iter_query_lines

_LINE_JOIN = f" {CONJUNCTION}\n"

EXAMPLE_QUERY = _LINE_JOIN.join([
    "Dividend Yield > 2",
    "P/E Ratio < 20",
    "Debt-to-Equity < 1",
])


def normalize_query(text: str) -> str:
    """Canonical form of *text*: blank lines dropped, every line but the last ends in ``AND``.

    Re-applying it is a no-op, and parsing the result gives the same
    conditions as parsing *text*.
    """
    return _LINE_JOIN.join(line for _, line in iter_query_lines(text))


def format_number(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_condition(condition: Condition) -> str:
    if not condition.operator:
        return condition.field
    return f"{condition.field} {condition.operator} {format_number(condition.value)}"


def format_query(conditions: Iterable[Condition]) -> str:
    return _LINE_JOIN.join(format_condition(c) for c in conditions)
