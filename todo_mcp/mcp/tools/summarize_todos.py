"""
Summarize Active Todos MCP Tool

Returns a markdown summary of the active todos.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import EmptyInput


class SummarizeActiveTodosTool(BaseMCPTool):
    """MCP Tool for the active todo summary"""

    name = "summarize-active-todos"
    description = "Generate a markdown summary of all active todos"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        return create_success_response(data={"summary": self.service.summarize_active_todos()})


def register_summarize_todos_tool(mcp_server, db_session: Session):
    """Register summarize-active-todos tool with MCP server"""
    register_tool_class(mcp_server, SummarizeActiveTodosTool, db_session)
