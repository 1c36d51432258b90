from screenq.data.loaders import (
    DEFAULT_DATASET,
    SOURCE_COLUMNS,
    parse_records_csv,
    read_records_csv,
    records_from_frame,
    records_to_frame,
    resolve_data_dir,
)
from screenq.data.local import LocalDatasetProvider
from screenq.data.providers import DatasetProvider

__all__ = [
    "DEFAULT_DATASET",
    "DatasetProvider",
    "LocalDatasetProvider",
    "SOURCE_COLUMNS",
    "parse_records_csv",
    "read_records_csv",
    "records_from_frame",
    "records_to_frame",
    "resolve_data_dir",
]
