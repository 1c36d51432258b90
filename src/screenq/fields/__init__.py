from screenq.fields.registry import (
    FIELD_LABELS,
    METRIC_FIELDS,
    field_from_key,
    label_for,
    read_field,
    read_number,
    resolve_field,
)

__all__ = [
    "FIELD_LABELS",
    "METRIC_FIELDS",
    "field_from_key",
    "label_for",
    "read_field",
    "read_number",
    "resolve_field",
]
