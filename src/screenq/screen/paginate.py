from __future__ import annotations

import math
from collections.abc import Sequence

from screenq.core.types import Page, Record

DEFAULT_PAGE_SIZE = 10


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        msg = f"page_size must be >= 1, got {page_size}"
        raise ValueError(msg)


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    _check_page_size(page_size)
    return math.ceil(total / page_size)


def paginate(
    records: Sequence[Record], page_number: int, page_size: int = DEFAULT_PAGE_SIZE,
) -> list[Record]:
    """Rows of page *page_number* (1-based).

    Out-of-range page numbers give an empty list; callers clamp first if
    they want the nearest valid page.
    """
    _check_page_size(page_size)
    if page_number < 1:
        return []
    start = (page_number - 1) * page_size
    return list(records[start:start + page_size])


def clamp_page(page_number: int, total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Nearest valid page number; page 1 when there are no rows."""
    last = max(1, page_count(total, page_size))
    return min(max(1, page_number), last)


def build_page(
    records: Sequence[Record], page_number: int, page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    return Page(
        number=page_number,
        size=page_size,
        total=len(records),
        records=tuple(paginate(records, page_number, page_size)),
    )
