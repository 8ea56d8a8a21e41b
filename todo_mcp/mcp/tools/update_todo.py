"""
Update Todo MCP Tool

Updates the title and/or description of a todo.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import UpdateTodoInput


class UpdateTodoTool(BaseMCPTool):
    """MCP Tool for updating todos"""

    name = "update-todo"
    description = "Update a todo's title or description"
    input_model = UpdateTodoInput

    async def execute(self, params: UpdateTodoInput) -> Dict[str, Any]:
        todo = self.service.update_todo(
            params.todo_id,
            title=params.title,
            description=params.description,
        )
        todo = self.require_todo(todo, params.todo_id)

        changes = [name for name in ("title", "description") if getattr(params, name) is not None]
        return create_success_response(
            data=todo.to_dict(),
            message=f"Todo updated ({', '.join(changes)})"
        )


def register_update_todo_tool(mcp_server, db_session: Session):
    """Register update-todo tool with MCP server"""
    register_tool_class(mcp_server, UpdateTodoTool, db_session)
