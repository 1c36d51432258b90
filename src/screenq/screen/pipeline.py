"""Screen pipeline — query, sort and page a dataset in one call."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from screenq.core.types import Record, ScreenRequest, ScreenResult
from screenq.query.diagnostics import diagnose_query
from screenq.query.parser import parse_query
from screenq.screen.filter import filter_by_conditions
from screenq.screen.paginate import build_page, clamp_page
from screenq.screen.sort import sort_records


def run_screen(records: Sequence[Record], request: ScreenRequest) -> ScreenResult:
    """Run filter → sort → paginate for one request.

    The requested page is clamped into range, so a stale page number after a
    narrower query lands on the last page instead of an empty one.
    """
    conditions = parse_query(request.query) if request.query.strip() else []
    diagnostics = diagnose_query(request.query)
    for diag in diagnostics:
        logger.debug(f"Query line {diag.line_number} ({diag.issue}): {diag.line!r}")

    matched = filter_by_conditions(records, conditions)
    ordered = sort_records(matched, request.sort)
    number = clamp_page(request.page, len(ordered), request.page_size)

    return ScreenResult(
        conditions=tuple(conditions),
        diagnostics=tuple(diagnostics),
        total=len(ordered),
        page=build_page(ordered, number, request.page_size),
    )
