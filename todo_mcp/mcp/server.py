"""
MCP Server Implementation

This module implements the tool registry the transports dispatch into.
Each registered tool validates its own input and invokes exactly one
TodoService operation.
"""

from typing import Dict, Any, Callable
from dataclasses import dataclass
import logging

from todo_mcp.mcp.base_tool import MCPToolError, create_error_response

logger = logging.getLogger(__name__)


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable


class MCPServer:
    """
    MCP Server for Todo Management

    Provides tools that clients can invoke to interact with the todo store.
    """

    def __init__(self, name: str = "todo-mcp-server"):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.debug(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise ValueError(f"Tool {name} not found. Available tools: {list(self.tools.keys())}")
        return self.tools[name]

    def has_tool(self, name: str) -> bool:
        return name in self.tools

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, **kwargs) -> Dict[str, Any]:
        """
        Invoke a tool with parameters

        Args:
            tool_name: Name of the tool to invoke
            **kwargs: Tool parameters

        Returns:
            Success response, or the error response for a failed tool call

        Raises:
            ValueError: If tool not found
        """
        tool = self.get_tool(tool_name)

        logger.info(f"Invoking MCP tool: {tool_name}")

        try:
            result = await tool.handler(**kwargs)
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except MCPToolError as e:
            logger.warning(f"Tool {tool_name} failed: [{e.code}] {e.message}")
            return create_error_response(e)

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }


# Global MCP server instance
mcp_server = MCPServer()


def get_mcp_server() -> MCPServer:
    """Get the global MCP server instance"""
    return mcp_server
