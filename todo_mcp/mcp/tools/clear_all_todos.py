"""
Clear All Todos MCP Tool

Deletes every todo. There is no confirmation step and no undo.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import EmptyInput


class ClearAllTodosTool(BaseMCPTool):
    """MCP Tool for wiping the todo list"""

    name = "clear-all-todos"
    description = "Delete all todos from the database"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        deleted = self.service.clear_all_todos()
        return create_success_response(
            data={"deleted": deleted},
            message=f"Deleted {deleted} todos"
        )


def register_clear_all_todos_tool(mcp_server, db_session: Session):
    """Register clear-all-todos tool with MCP server"""
    register_tool_class(mcp_server, ClearAllTodosTool, db_session)
