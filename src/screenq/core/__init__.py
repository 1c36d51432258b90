from screenq.core.errors import (
    DatasetLoadError,
    DatasetNotFoundError,
    FieldNotFoundError,
    ScreenqError,
)
from screenq.core.types import (
    Condition,
    Field,
    Page,
    QueryDiagnostic,
    Record,
    ScreenRequest,
    ScreenResult,
    SortDirection,
    SortState,
)

__all__ = [
    "Condition",
    "DatasetLoadError",
    "DatasetNotFoundError",
    "Field",
    "FieldNotFoundError",
    "Page",
    "QueryDiagnostic",
    "Record",
    "ScreenRequest",
    "ScreenResult",
    "ScreenqError",
    "SortDirection",
    "SortState",
]
