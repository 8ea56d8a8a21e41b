"""
Get Todo MCP Tool

Retrieves a single todo by its ID.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import TodoIdInput


class GetTodoTool(BaseMCPTool):
    """MCP Tool for viewing a todo"""

    name = "get-todo"
    description = "Get a specific todo by ID"
    input_model = TodoIdInput

    async def execute(self, params: TodoIdInput) -> Dict[str, Any]:
        todo = self.require_todo(self.service.get_todo(params.todo_id), params.todo_id)
        return create_success_response(data=todo.to_dict())


def register_get_todo_tool(mcp_server, db_session: Session):
    """Register get-todo tool with MCP server"""
    register_tool_class(mcp_server, GetTodoTool, db_session)
