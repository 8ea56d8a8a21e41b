"""
Delete Todo MCP Tool

Permanently deletes a todo.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response, register_tool_class
from todo_mcp.schemas.todo import TodoIdInput


class DeleteTodoTool(BaseMCPTool):
    """MCP Tool for deleting todos"""

    name = "delete-todo"
    description = "Delete a todo permanently"
    input_model = TodoIdInput

    async def execute(self, params: TodoIdInput) -> Dict[str, Any]:
        if not self.service.delete_todo(params.todo_id):
            raise MCPToolError(
                code="NOT_FOUND",
                message=f"Todo {params.todo_id} not found",
                details={"id": params.todo_id}
            )

        return create_success_response(
            data={"id": params.todo_id, "deleted": True},
            message=f"Todo {params.todo_id} deleted"
        )


def register_delete_todo_tool(mcp_server, db_session: Session):
    """Register delete-todo tool with MCP server"""
    register_tool_class(mcp_server, DeleteTodoTool, db_session)
