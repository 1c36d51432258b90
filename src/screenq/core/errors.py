from __future__ import annotations


class ScreenqError(Exception):
    """Framework base exception."""


class DatasetNotFoundError(ScreenqError):
    """Local dataset file not found."""


class DatasetLoadError(ScreenqError):
    """Dataset file exists but could not be read."""


class FieldNotFoundError(ScreenqError):
    """Field key or label is not part of the record schema."""
