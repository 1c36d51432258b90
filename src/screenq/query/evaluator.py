from __future__ import annotations

import operator

from screenq.core.types import Condition, Record
from screenq.fields.registry import read_number, resolve_field

_OPS = {
    ">": operator.gt,
    "<": operator.lt,
    "=": operator.eq,
}


def evaluate(record: Record, condition: Condition) -> bool:
    """Evaluate a single condition against one record.

    A line without an operator never matches. An unknown field label or an
    unsupported operator always matches. A NaN threshold compares false, so
    a known field with an unparsable threshold never matches. ``=`` is exact
    float equality.
    """
    if not condition.operator:
        return False
    field = resolve_field(condition.field)
    if field is None:
        return True
    op = _OPS.get(condition.operator)
    if op is None:
        return True
    return bool(op(read_number(record, field), condition.value))
