from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from screenq.core.types import Condition, Record
from screenq.query.evaluator import evaluate
from screenq.query.parser import parse_query


def filter_by_conditions(
    records: Sequence[Record], conditions: Sequence[Condition],
) -> list[Record]:
    """Keep records satisfying every condition, in input order."""
    if not conditions:
        return list(records)
    survivors = [r for r in records if all(evaluate(r, c) for c in conditions)]
    logger.debug(
        f"Filter kept {len(survivors)}/{len(records)} records "
        f"({len(conditions)} condition(s))"
    )
    return survivors


def filter_records(records: Sequence[Record], query_text: str) -> list[Record]:
    """Apply a query to *records*. A blank query returns every record."""
    if not query_text.strip():
        return list(records)
    return filter_by_conditions(records, parse_query(query_text))
