"""Line-oriented query parser.

One comparison per line, optionally ending in ``AND``::

    Dividend Yield > 2 AND
    P/E Ratio < 20 AND
    Debt-to-Equity < 1

Parsing never fails: a line without an operator or whose threshold does not
start with a number still yields a :class:`Condition`, with ``value`` set to NaN.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator

from loguru import logger

from screenq.core.types import Condition

OPERATORS: tuple[str, ...] = (">", "<", "=")

CONJUNCTION = "AND"

_TRAILING_CONJUNCTION = re.compile(r"(?:^|\s+)AND\s*$", re.IGNORECASE)
_OPERATOR = re.compile(r"\s*([><=])\s*")
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def strip_conjunction(line: str) -> str:
    """Remove a trailing ``AND`` and surrounding whitespace from one line."""
    return _TRAILING_CONJUNCTION.sub("", line).strip()


def iter_query_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for each non-blank line, conjunction removed."""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = strip_conjunction(raw)
        if line:
            yield number, line


def parse_number(text: str) -> float:
    """Parse a threshold from its leading number.

    Thousands separators are dropped and trailing text such as a ``%`` sign
    is ignored. No leading number, or a non-finite one, gives NaN.
    """
    match = _NUMBER_PREFIX.match(text.replace(",", ""))
    if match is None:
        return math.nan
    value = float(match.group())
    return value if math.isfinite(value) else math.nan


def parse_line(line: str) -> Condition:
    """Split one cleaned line on its first operator."""
    parts = _OPERATOR.split(line, maxsplit=1)
    if len(parts) < 3:
        return Condition(field=line.strip(), operator="", value=math.nan)
    label, op, value_text = parts
    return Condition(field=label.strip(), operator=op, value=parse_number(value_text))


def parse_query(text: str) -> list[Condition]:
    """Parse query text into conditions, in line order."""
    conditions = [parse_line(line) for _, line in iter_query_lines(text)]
    logger.debug(f"Parsed {len(conditions)} condition(s) from query")
    return conditions
