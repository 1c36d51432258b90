from __future__ import annotations

from collections.abc import Callable, Sequence

from screenq.core.types import Field, Record, SortState
from screenq.fields.registry import read_field, read_number


def _sort_key(field: Field) -> Callable[[Record], float | str]:
    if field is Field.NAME:
        return lambda r: read_field(r, Field.NAME) or ""
    return lambda r: read_number(r, field)


def sort_records(records: Sequence[Record], sort_state: SortState) -> list[Record]:
    """Return a new list ordered by ``sort_state``.

    The sort is stable in both directions: records with equal keys keep
    their input order whether ascending or descending.
    """
    return sorted(
        records,
        key=_sort_key(sort_state.field),
        reverse=sort_state.direction == "desc",
    )
