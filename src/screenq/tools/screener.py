"""Screener tools — run a query, explain a query, list queryable fields."""

from __future__ import annotations

import math
from dataclasses import asdict
from pathlib import Path
from typing import Any

from screenq.core.errors import ScreenqError
from screenq.core.types import Condition, QueryDiagnostic, ScreenRequest, SortState
from screenq.data.loaders import DEFAULT_DATASET
from screenq.data.local import LocalDatasetProvider
from screenq.fields.registry import METRIC_FIELDS, field_from_key, label_for, resolve_field
from screenq.query import (
    EXAMPLE_QUERY,
    OPERATORS,
    diagnose_query,
    format_condition,
    normalize_query,
    parse_query,
)
from screenq.screen.paginate import DEFAULT_PAGE_SIZE
from screenq.screen.pipeline import run_screen
from screenq.tools.registry import registry


def condition_to_dict(condition: Condition) -> dict[str, Any]:
    field = resolve_field(condition.field)
    return {
        "field": condition.field,
        "operator": condition.operator,
        # NaN is not valid JSON
        "value": None if math.isnan(condition.value) else condition.value,
        "resolved_field": field.value if field else None,
        "text": format_condition(condition),
    }


def diagnostic_to_dict(diagnostic: QueryDiagnostic) -> dict[str, Any]:
    return asdict(diagnostic)


@registry.tool(
    name="screen_run",
    description=(
        "Screen a local stock dataset. 'query' holds one condition per line "
        "(e.g. 'P/E Ratio < 20'), lines AND-combined. Results are sorted by "
        "'sort_field' in 'direction' (asc/desc) and paged."
    ),
)
def screen_run(
    query: str = "",
    sort_field: str = "id",
    direction: str = "asc",
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    dataset: str = DEFAULT_DATASET,
    data_dir: str | None = None,
) -> dict[str, Any]:
    """Run the filter, sort and paginate pipeline over a local dataset."""
    if direction not in ("asc", "desc"):
        return {"error": f"Unknown direction '{direction}'. Use 'asc' or 'desc'."}
    if page_size < 1:
        return {"error": f"page_size must be >= 1, got {page_size}."}
    try:
        field = field_from_key(sort_field)
        provider = LocalDatasetProvider(Path(data_dir) if data_dir else None)
        records = provider.get_records(dataset)
    except ScreenqError as exc:
        return {"error": str(exc)}

    request = ScreenRequest(
        query=query,
        sort=SortState(field=field, direction=direction),  # type: ignore[arg-type]
        page=page,
        page_size=page_size,
    )
    result = run_screen(records, request)
    return {
        "dataset": dataset,
        "total": result.total,
        "page": result.page.number,
        "page_size": result.page.size,
        "page_count": result.page.page_count,
        "showing": [result.page.start_index, result.page.end_index],
        "sort": {"field": field.value, "direction": direction},
        "conditions": [condition_to_dict(c) for c in result.conditions],
        "diagnostics": [diagnostic_to_dict(d) for d in result.diagnostics],
        "rows": [asdict(r) for r in result.page.records],
    }


@registry.tool(
    name="query_parse",
    description="Parse a screen query and report lines that are ignored or match nothing",
)
def query_parse(query: str) -> dict[str, Any]:
    """Parse *query* without running it."""
    conditions = parse_query(query)
    return {
        "conditions": [condition_to_dict(c) for c in conditions],
        "count": len(conditions),
        "diagnostics": [diagnostic_to_dict(d) for d in diagnose_query(query)],
        "normalized": normalize_query(query),
    }


@registry.tool(
    name="fields_list",
    description="List field labels usable in queries and keys usable for sorting",
)
def fields_list() -> dict[str, Any]:
    """Describe the query vocabulary."""
    return {
        "fields": [{"key": f.value, "label": label_for(f)} for f in METRIC_FIELDS],
        "sortable": ["id", "name", *(f.value for f in METRIC_FIELDS)],
        "operators": list(OPERATORS),
        "example": EXAMPLE_QUERY,
    }
