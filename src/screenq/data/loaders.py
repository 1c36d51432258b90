"""CSV dataset loading: source columns → :class:`Record` rows."""

from __future__ import annotations

import io
import math
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import IO

import pandas as pd
from loguru import logger

from screenq.core.errors import DatasetLoadError
from screenq.core.types import Field, Record

DEFAULT_DATASET = "stocks"

TICKER_COLUMN = "Ticker"

# Record field → column header in the published sheet
SOURCE_COLUMNS: dict[Field, str] = {
    Field.MARKET_CAP: "Market Capitalization (B)",
    Field.PE: "P/E Ratio",
    Field.ROE: "ROE (%)",
    Field.DEBT_TO_EQUITY: "Debt-to-Equity",
    Field.DIV_YIELD: "Dividend Yield (%)",
    Field.REVENUE_GROWTH: "Revenue Growth (%)",
    Field.EPS_GROWTH: "EPS Growth (%)",
    Field.CURRENT_RATIO: "Current Ratio",
    Field.GROSS_MARGIN: "Gross Margin (%)",
}

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def resolve_data_dir(dest_dir: Path | None = None) -> Path:
    """Resolve dataset directory. Priority: parameter > SCREENQ_DATA_DIR > default."""
    if dest_dir is not None:
        return dest_dir
    env = os.environ.get("SCREENQ_DATA_DIR")
    if env:
        return Path(env)
    return Path.home() / ".screenq" / "data"


def to_number(raw: object) -> float:
    """Lenient cell parser: thousands separators dropped, leading number kept, else 0."""
    if raw is None:
        return 0.0
    text = str(raw).replace(",", "")
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    value = float(match.group())
    return value if math.isfinite(value) else 0.0


def records_from_frame(df: pd.DataFrame) -> list[Record]:
    """Build records from a sheet-shaped DataFrame.

    Rows without a ticker are dropped; ids run 1..n over the rows kept.
    Missing columns and unparsable cells read as zero.
    """
    if TICKER_COLUMN not in df.columns:
        logger.warning(f"Dataset has no '{TICKER_COLUMN}' column; no records loaded")
        return []

    records: list[Record] = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        name = row.get(TICKER_COLUMN)
        if name is None or pd.isna(name):
            name = ""
        name = str(name).strip()
        if not name:
            skipped += 1
            continue
        metrics = {
            f.value: to_number(row.get(column)) for f, column in SOURCE_COLUMNS.items()
        }
        records.append(Record(id=len(records) + 1, name=name, **metrics))

    if skipped:
        logger.warning(f"Skipped {skipped} row(s) without a ticker")
    return records


def read_records_csv(source: str | Path | IO[str]) -> list[Record]:
    """Read a CSV file (path or open text buffer) into records."""
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        logger.warning(f"Empty dataset: {source}")
        return []
    except pd.errors.ParserError as exc:
        msg = f"Failed to parse dataset {source}: {exc}"
        raise DatasetLoadError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"Dataset {source} is not valid UTF-8: {exc}"
        raise DatasetLoadError(msg) from exc
    except OSError as exc:
        msg = f"Failed to read dataset {source}: {exc}"
        raise DatasetLoadError(msg) from exc
    return records_from_frame(df)


def parse_records_csv(text: str) -> list[Record]:
    """Parse CSV text already fetched by the caller."""
    return read_records_csv(io.StringIO(text))


def records_to_frame(records: list[Record]) -> pd.DataFrame:
    """Records as a DataFrame with one column per :class:`Field` key."""
    columns = [f.value for f in Field]
    return pd.DataFrame([asdict(r) for r in records], columns=columns)
