from __future__ import annotations

import math

from screenq.core.types import QueryDiagnostic
from screenq.fields.registry import FIELD_LABELS, resolve_field
from screenq.query.parser import OPERATORS, iter_query_lines, parse_line


def diagnose_query(text: str) -> list[QueryDiagnostic]:
    """Report lines the filter ignores or treats as matching nothing.

    At most one diagnostic per line, describing how the line will actually
    behave: a line without an operator never matches, an unknown field is
    ignored whatever its threshold, and an unparsable threshold on a known
    field never matches.
    """
    diagnostics: list[QueryDiagnostic] = []
    for number, line in iter_query_lines(text):
        condition = parse_line(line)
        if not condition.operator:
            diagnostics.append(QueryDiagnostic(
                line_number=number,
                line=line,
                issue="missing_operator",
                message=(
                    f"No operator found; expected one of {', '.join(OPERATORS)}. "
                    "This line matches no records."
                ),
            ))
        elif resolve_field(condition.field) is None:
            diagnostics.append(QueryDiagnostic(
                line_number=number,
                line=line,
                issue="unknown_field",
                message=(
                    f"Unknown field '{condition.field}'; this line is ignored. "
                    f"Available: {sorted(FIELD_LABELS)}"
                ),
            ))
        elif math.isnan(condition.value):
            diagnostics.append(QueryDiagnostic(
                line_number=number,
                line=line,
                issue="invalid_number",
                message=(
                    f"Threshold after '{condition.operator}' is not a number. "
                    "This line matches no records."
                ),
            ))
    return diagnostics
