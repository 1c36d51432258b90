"""Dataset tools — list and inspect local datasets."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from screenq.core.errors import ScreenqError
from screenq.data.loaders import DEFAULT_DATASET, records_to_frame
from screenq.data.local import LocalDatasetProvider
from screenq.fields.registry import METRIC_FIELDS
from screenq.tools.registry import registry


@registry.tool(
    name="dataset_list",
    description="List locally available stock datasets (CSV files)",
)
def dataset_list(data_dir: str | None = None) -> dict[str, Any]:
    """List local datasets."""
    provider = LocalDatasetProvider(Path(data_dir) if data_dir else None)
    datasets = provider.list_datasets()
    return {"datasets": datasets, "count": len(datasets), "data_dir": str(provider.data_dir)}


@registry.tool(
    name="dataset_inspect",
    description="Inspect a dataset (row count, value ranges, zero-filled cells, sample rows)",
)
def dataset_inspect(
    dataset: str = DEFAULT_DATASET,
    data_dir: str | None = None,
) -> dict[str, Any]:
    """Summarize a local dataset."""
    provider = LocalDatasetProvider(Path(data_dir) if data_dir else None)
    try:
        records = provider.get_records(dataset)
    except ScreenqError as exc:
        return {"dataset": dataset, "error": str(exc)}

    df = records_to_frame(records)
    result: dict[str, Any] = {
        "dataset": dataset,
        "rows": len(df),
        "columns": list(df.columns),
    }
    if df.empty:
        return result

    metric_cols = [f.value for f in METRIC_FIELDS]
    result["ranges"] = {
        col: [float(df[col].min()), float(df[col].max())] for col in metric_cols
    }
    # Zero is also what unparsable or missing cells load as
    result["zero_values"] = {col: int((df[col] == 0).sum()) for col in metric_cols}
    result["sample_head"] = df.head(3).astype(str).to_dict(orient="records")
    return result
