from __future__ import annotations

from pathlib import Path

from loguru import logger

from screenq.core.errors import DatasetNotFoundError
from screenq.core.types import Record
from screenq.data.loaders import DEFAULT_DATASET, read_records_csv, resolve_data_dir


class LocalDatasetProvider:
    """Read datasets from local CSV files. Implements DatasetProvider Protocol."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = resolve_data_dir(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.csv"

    def get_records(self, name: str = DEFAULT_DATASET) -> list[Record]:
        path = self.path_for(name)
        if not path.exists():
            msg = f"No dataset '{name}' in {self._data_dir}."
            raise DatasetNotFoundError(msg)
        records = read_records_csv(path)
        logger.info(f"Loaded {len(records)} records from {path}")
        return records

    def list_datasets(self) -> list[str]:
        if not self._data_dir.exists():
            return []
        return sorted(p.stem for p in self._data_dir.glob("*.csv"))
