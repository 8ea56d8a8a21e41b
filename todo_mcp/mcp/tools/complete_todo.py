"""
Complete Todo MCP Tool

Marks a todo as completed: stamps completedAt and sets status to Done.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import TodoIdInput


class CompleteTodoTool(BaseMCPTool):
    """MCP Tool for completing todos"""

    name = "complete-todo"
    description = "Mark a todo as completed"
    input_model = TodoIdInput

    async def execute(self, params: TodoIdInput) -> Dict[str, Any]:
        todo = self.require_todo(self.service.complete_todo(params.todo_id), params.todo_id)

        return create_success_response(
            data=todo.to_dict(),
            message=f"Todo '{todo.title}' marked as completed"
        )


def register_complete_todo_tool(mcp_server, db_session: Session):
    """Register complete-todo tool with MCP server"""
    register_tool_class(mcp_server, CompleteTodoTool, db_session)
