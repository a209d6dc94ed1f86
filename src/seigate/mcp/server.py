"""MCP server exposing the tool catalog."""

import json
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server

from seigate import __version__
from seigate.mcp.sessions import McpSession
from seigate.tools.catalog import TOOLS
from seigate.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "seigate"


def build_mcp_server(dispatcher: ToolDispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters)
            for tool in TOOLS
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        # Errors raised here come back to the client as an isError result carrying the message
        output = await dispatcher.dispatch(name, arguments)
        return [types.TextContent(type="text", text=json.dumps(output, indent=2))]

    return server


async def run_session(server: Server, session: McpSession) -> None:
    logger.debug("Serving MCP session %s", session.id)
    await server.run(session.inbound_reader, session.outbound_writer, server.create_initialization_options())
