"""Field registry: query labels and record accessors for every attribute."""

from __future__ import annotations

from collections.abc import Callable

from screenq.core.errors import FieldNotFoundError
from screenq.core.types import Field, Record

# Numeric attributes, in display order.
METRIC_FIELDS: tuple[Field, ...] = (
    Field.MARKET_CAP,
    Field.PE,
    Field.ROE,
    Field.DEBT_TO_EQUITY,
    Field.DIV_YIELD,
    Field.REVENUE_GROWTH,
    Field.EPS_GROWTH,
    Field.CURRENT_RATIO,
    Field.GROSS_MARGIN,
)

# Label as typed in a query → field. Keys are case-sensitive.
FIELD_LABELS: dict[str, Field] = {
    "Market Capitalization": Field.MARKET_CAP,
    "P/E Ratio": Field.PE,
    "ROE": Field.ROE,
    "Debt-to-Equity": Field.DEBT_TO_EQUITY,
    "Dividend Yield": Field.DIV_YIELD,
    "Revenue Growth": Field.REVENUE_GROWTH,
    "EPS Growth": Field.EPS_GROWTH,
    "Current Ratio": Field.CURRENT_RATIO,
    "Gross Margin": Field.GROSS_MARGIN,
}

_SELECTORS: dict[Field, Callable[[Record], float | int | str]] = {
    Field.ID: lambda r: r.id,
    Field.NAME: lambda r: r.name,
    Field.MARKET_CAP: lambda r: r.market_cap,
    Field.PE: lambda r: r.pe,
    Field.ROE: lambda r: r.roe,
    Field.DEBT_TO_EQUITY: lambda r: r.debt_to_equity,
    Field.DIV_YIELD: lambda r: r.div_yield,
    Field.REVENUE_GROWTH: lambda r: r.revenue_growth,
    Field.EPS_GROWTH: lambda r: r.eps_growth,
    Field.CURRENT_RATIO: lambda r: r.current_ratio,
    Field.GROSS_MARGIN: lambda r: r.gross_margin,
}

_LABELS_BY_FIELD: dict[Field, str] = {f: label for label, f in FIELD_LABELS.items()}

_missing = [f.name for f in METRIC_FIELDS if f not in _LABELS_BY_FIELD]
if _missing:
    raise RuntimeError(f"Metric fields without a query label: {_missing}")


def resolve_field(label: str) -> Field | None:
    """Look up a query label. Returns ``None`` when the label is unknown."""
    return FIELD_LABELS.get(label)


def label_for(field: Field) -> str | None:
    """Query label for a metric field, ``None`` for id and name."""
    return _LABELS_BY_FIELD.get(field)


def read_field(record: Record, field: Field) -> float | int | str:
    return _SELECTORS[field](record)


def read_number(record: Record, field: Field) -> float:
    """Numeric value of *field*; a missing (``None``) value reads as zero."""
    value = _SELECTORS[field](record)
    if value is None:
        return 0.0
    return float(value)


def field_from_key(key: str) -> Field:
    """Resolve a field from its key, enum name or query label.

    Used for caller-supplied arguments such as a sort column; the query path
    uses :func:`resolve_field` instead and never raises.
    """
    text = key.strip()
    for f in Field:
        if text in (f.value, f.name):
            return f
    by_label = FIELD_LABELS.get(text)
    if by_label is not None:
        return by_label
    valid = sorted(f.value for f in Field)
    msg = f"Unknown field '{key}'. Available: {valid}"
    raise FieldNotFoundError(msg)
