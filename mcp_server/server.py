from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from screenq.fields.registry import FIELD_LABELS
from screenq.query import EXAMPLE_QUERY, OPERATORS
from screenq.tools import registry

mcp = FastMCP("screenq")

# Auto-register all SDK tools from the registry
for tool_def in registry.all_tools():
    mcp.tool(name=tool_def.name, description=tool_def.description)(tool_def.fn)


# MCP-only tool (not part of screenq SDK)
@mcp.tool(
    name="get_query_guide",
    description=(
        "Explain the screen query syntax. Call this FIRST before writing "
        "a query for screen_run."
    ),
)
def get_query_guide() -> dict[str, Any]:
    return {
        "syntax": "<Field Label> <operator> <number>, one condition per line, lines joined with AND",
        "operators": list(OPERATORS),
        "field_labels": sorted(FIELD_LABELS),
        "example": EXAMPLE_QUERY,
        "notes": [
            "Field labels are case-sensitive.",
            "Lines with an unknown field label are ignored.",
            "Thresholds are read from their leading number, so 2% reads as 2.",
            "Lines without an operator, or with no number after a known field, match no stocks.",
        ],
    }


if __name__ == "__main__":
    mcp.run(transport="stdio")
