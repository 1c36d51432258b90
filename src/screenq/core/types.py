"""Core value types shared by the query, screen and data layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

SortDirection = Literal["asc", "desc"]

DiagnosticIssue = Literal["missing_operator", "invalid_number", "unknown_field"]


class Field(Enum):
    """Closed set of record attributes. Values are the snake_case keys."""

    ID = "id"
    NAME = "name"
    MARKET_CAP = "market_cap"
    PE = "pe"
    ROE = "roe"
    DEBT_TO_EQUITY = "debt_to_equity"
    DIV_YIELD = "div_yield"
    REVENUE_GROWTH = "revenue_growth"
    EPS_GROWTH = "eps_growth"
    CURRENT_RATIO = "current_ratio"
    GROSS_MARGIN = "gross_margin"


@dataclass(frozen=True)
class Record:
    """One stock's fundamentals row. ``id`` is 1-based in source order."""

    id: int
    name: str
    market_cap: float = 0.0
    pe: float = 0.0
    roe: float = 0.0
    debt_to_equity: float = 0.0
    div_yield: float = 0.0
    revenue_growth: float = 0.0
    eps_growth: float = 0.0
    current_ratio: float = 0.0
    gross_margin: float = 0.0


@dataclass(frozen=True)
class Condition:
    """One parsed comparison line.

    ``field`` is the label exactly as typed. ``operator`` is empty when the
    line had no comparison symbol, and ``value`` is NaN when the threshold
    text did not start with a number.
    """

    field: str
    operator: str
    value: float

    @property
    def is_parsed(self) -> bool:
        return bool(self.operator) and not math.isnan(self.value)


@dataclass(frozen=True)
class QueryDiagnostic:
    """A query line that the filter ignores or treats as never matching."""

    line_number: int
    line: str
    issue: DiagnosticIssue
    message: str


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""

    field: Field = Field.ID
    direction: SortDirection = "asc"

    def toggled(self, field: Field) -> SortState:
        """Return the state after selecting *field*.

        Selecting the active field flips the direction; any other field
        starts ascending.
        """
        if field is self.field:
            return SortState(field=field, direction="desc" if self.direction == "asc" else "asc")
        return SortState(field=field, direction="asc")


@dataclass(frozen=True)
class Page:
    """One page of an ordered result list."""

    number: int
    size: int
    total: int
    records: tuple[Record, ...]

    def __post_init__(self) -> None:
        if isinstance(self.records, list):
            object.__setattr__(self, "records", tuple(self.records))

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.size) if self.size > 0 else 0

    @property
    def start_index(self) -> int:
        """1-based position of the first row on this page, 0 when empty."""
        if not self.records:
            return 0
        return (self.number - 1) * self.size + 1

    @property
    def end_index(self) -> int:
        """1-based position of the last row on this page, 0 when empty."""
        if not self.records:
            return 0
        return self.start_index + len(self.records) - 1

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.page_count


@dataclass(frozen=True)
class ScreenRequest:
    """Everything needed to render one result view."""

    query: str = ""
    sort: SortState = field(default_factory=SortState)
    page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class ScreenResult:
    """Output of one pass through the filter, sort and paginate pipeline."""

    conditions: tuple[Condition, ...]
    diagnostics: tuple[QueryDiagnostic, ...]
    total: int
    page: Page
