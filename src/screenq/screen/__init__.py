from screenq.screen.filter import filter_by_conditions, filter_records
from screenq.screen.paginate import (
    DEFAULT_PAGE_SIZE,
    build_page,
    clamp_page,
    page_count,
    paginate,
)
from screenq.screen.pipeline import run_screen
from screenq.screen.sort import sort_records

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "build_page",
    "clamp_page",
    "filter_by_conditions",
    "filter_records",
    "page_count",
    "paginate",
    "run_screen",
    "sort_records",
]
