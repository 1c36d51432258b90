from screenq.query.diagnostics import diagnose_query
from screenq.query.evaluator import evaluate
from screenq.query.format import (
    EXAMPLE_QUERY,
    format_condition,
    format_query,
    normalize_query,
)
from screenq.query.parser import OPERATORS, parse_line, parse_query

__all__ = [
    "EXAMPLE_QUERY",
    "OPERATORS",
    "diagnose_query",
    "evaluate",
    "format_condition",
    "format_query",
    "normalize_query",
    "parse_line",
    "parse_query",
]
