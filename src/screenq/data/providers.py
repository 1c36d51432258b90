from __future__ import annotations

from typing import Protocol, runtime_checkable

from screenq.core.types import Record


@runtime_checkable
class DatasetProvider(Protocol):
    """Dataset interface: the only entry point for the screen to obtain records."""

    def get_records(self, name: str) -> list[Record]: ...

    def list_datasets(self) -> list[str]: ...
