"""
MCP stdio transport

Serves the registered todo tools over the Model Context Protocol on
stdin/stdout. The database engine and the session behind every tool are
opened once at startup and released when the client disconnects.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from sqlmodel import Session

from todo_mcp.db.config import DATABASE_URL, create_db_engine
from todo_mcp.db.init import init_db
from todo_mcp.mcp.server import MCPServer
from todo_mcp.mcp.tools import register_all_tools
from todo_mcp.utils.logger import LOG_LEVEL

logger = logging.getLogger(__name__)


def _text(content: Any) -> list[TextContent]:
    if isinstance(content, str):
        return [TextContent(type="text", text=content)]
    return [TextContent(type="text", text=json.dumps(content, indent=2, default=str))]


class ToolCallFailed(Exception):
    """A tool returned an error envelope; the MCP server reports it as an isError result."""

    def __init__(self, envelope: dict[str, Any]):
        self.envelope = envelope
        super().__init__(json.dumps(envelope, indent=2, default=str))


def _tool_result(envelope: dict[str, Any]) -> list[TextContent]:
    if not envelope.get("success", False):
        raise ToolCallFailed(envelope)
    return _text(envelope)


def build_server(registry: MCPServer) -> Server:
    """Expose the tools of a registry through an MCP protocol server"""
    server = Server(registry.name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(name=schema["name"], description=schema["description"], inputSchema=schema["parameters"])
            for schema in registry.get_tool_schemas().values()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        if not registry.has_tool(name):
            raise ToolCallFailed({"success": False, "error": {"code": "UNKNOWN_TOOL", "message": f"Unknown tool: {name}"}})

        result = await registry.invoke_tool(name, **(arguments or {}))
        return _tool_result(result)

    return server


async def _run(database_url: str) -> None:
    engine = create_db_engine(database_url)
    init_db(engine)

    registry = MCPServer()
    session = Session(engine)
    try:
        tools = register_all_tools(registry, session)
        logger.info(f"MCP Server initialized with tools: {tools}")

        server = build_server(registry)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        session.close()
        engine.dispose()
        logger.info("Database connection closed")


def main() -> None:
    parser = argparse.ArgumentParser(description="Todo MCP server (stdio)")
    parser.add_argument(
        "--database-url",
        default=DATABASE_URL,
        help="SQLAlchemy database URL (default: DATABASE_URL env or sqlite:///./todos.db)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        stream=sys.stderr,
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    asyncio.run(_run(args.database_url))


if __name__ == "__main__":
    main()
