from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import pytest
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

PROJECT_ROOT = str(Path(__file__).resolve().parents[2])


@pytest.fixture()
def server_params() -> StdioServerParameters:
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "mcp_server.server"],
        cwd=PROJECT_ROOT,
    )


async def _list_tools(server_params: StdioServerParameters) -> list[str]:
    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            result = await session.list_tools()
            return [t.name for t in result.tools]


def test_server_lists_screen_tools(server_params: StdioServerParameters) -> None:
    tool_names = asyncio.run(_list_tools(server_params))
    assert "screen_run" in tool_names
    assert "query_parse" in tool_names
    assert "fields_list" in tool_names


def test_server_lists_dataset_tools(server_params: StdioServerParameters) -> None:
    tool_names = asyncio.run(_list_tools(server_params))
    assert "dataset_list" in tool_names
    assert "dataset_inspect" in tool_names


def test_server_lists_mcp_only_tools(server_params: StdioServerParameters) -> None:
    tool_names = asyncio.run(_list_tools(server_params))
    assert "get_query_guide" in tool_names


async def _call_tool(
    server_params: StdioServerParameters, name: str, arguments: dict,
) -> dict:
    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            result = await session.call_tool(name, arguments)
            return json.loads(result.content[0].text)


def test_server_call_query_parse(server_params: StdioServerParameters) -> None:
    result = asyncio.run(_call_tool(server_params, "query_parse", {"query": "ROE > 15"}))
    assert result["count"] == 1
    assert result["conditions"][0]["resolved_field"] == "roe"


def test_server_call_dataset_list(
    server_params: StdioServerParameters, tmp_path: Path,
) -> None:
    (tmp_path / "stocks.csv").write_text("Ticker\nAAPL\n")
    result = asyncio.run(
        _call_tool(server_params, "dataset_list", {"data_dir": str(tmp_path)}),
    )
    assert result["datasets"] == ["stocks"]
