import asyncio
import json

import pytest
from fastmcp.exceptions import ToolError

from naver_search.catalog import list_operations
from naver_tools.mcp_server import OperationTool, create_server


def _tool(dispatcher, name):
    operation = next(op for op in dispatcher.operations if op.name == name)
    return OperationTool.from_operation(operation, dispatcher)


def test_server_registers_every_catalog_operation(dispatcher):
    server = create_server(dispatcher)

    tools = asyncio.run(server.get_tools())

    assert set(tools) == {entry["name"] for entry in list_operations()}


def test_tool_advertises_the_catalog_schema(dispatcher):
    tool = _tool(dispatcher, "datalab_shopping_by_age")
    entry = next(e for e in list_operations() if e["name"] == "datalab_shopping_by_age")

    assert tool.parameters == entry["inputSchema"]
    assert tool.description == entry["description"]


def test_successful_call_returns_json_text(dispatcher, fake_urlopen):
    fake_urlopen.payload = {"total": 1, "items": [{"title": "뉴스"}]}

    result = asyncio.run(_tool(dispatcher, "search_news").run({"query": "golang"}))

    assert json.loads(result.content[0].text) == {"total": 1, "items": [{"title": "뉴스"}]}
    assert "뉴스" in result.content[0].text


def test_failed_call_raises_tool_error(dispatcher, fake_urlopen):
    with pytest.raises(ToolError) as exc_info:
        asyncio.run(_tool(dispatcher, "search_news").run({}))

    assert str(exc_info.value).startswith("Error: Invalid arguments for search_news")
    assert fake_urlopen.call_count == 0


def test_tool_holds_the_dispatcher_it_was_built_with(dispatcher):
    tool = _tool(dispatcher, "search_news")

    assert tool.dispatcher is dispatcher
