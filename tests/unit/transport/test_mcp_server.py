import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp import types

from seigate.exceptions import ValidationError
from seigate.mcp.server import build_mcp_server
from seigate.tools.catalog import TOOLS


@pytest.fixture()
def dispatcher():
    mock = MagicMock()
    mock.dispatch = AsyncMock()
    return mock


@pytest.fixture()
def server(dispatcher):
    return build_mcp_server(dispatcher)


class TestMcpServer:
    async def test_lists_catalog(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = await handler(types.ListToolsRequest(method="tools/list"))

        tools = result.root.tools
        assert [tool.name for tool in tools] == [tool.name for tool in TOOLS]
        balance = next(tool for tool in tools if tool.name == "get_balance")
        assert balance.inputSchema["required"] == ["address"]

    async def test_call_renders_indented_json(self, server, dispatcher):
        dispatcher.dispatch.return_value = {"network": "sei", "block_number": "42"}
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_block_number", arguments={"network": "sei"}),
        ))

        call_result = result.root
        assert call_result.isError is False
        assert len(call_result.content) == 1
        text = call_result.content[0].text
        assert text == json.dumps({"network": "sei", "block_number": "42"}, indent=2)
        dispatcher.dispatch.assert_awaited_once_with("get_block_number", {"network": "sei"})

    async def test_errors_become_error_results(self, server, dispatcher):
        dispatcher.dispatch.side_effect = ValidationError("Unknown function: get_logs")
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_logs", arguments={}),
        ))

        assert result.root.isError is True
        assert "Unknown function: get_logs" in result.root.content[0].text
