"""
Create Todo MCP Tool

Creates a single todo with the next task number.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import CreateTodoInput


class CreateTodoTool(BaseMCPTool):
    """MCP Tool for creating todos"""

    name = "create-todo"
    description = "Create a new todo item"
    input_model = CreateTodoInput

    async def execute(self, params: CreateTodoInput) -> Dict[str, Any]:
        todo = self.service.create_todo(title=params.title, description=params.description)

        return create_success_response(
            data=todo.to_dict(),
            message=f"Todo '{todo.title}' created as task {todo.task_number}"
        )


def register_create_todo_tool(mcp_server, db_session: Session):
    """Register create-todo tool with MCP server"""
    register_tool_class(mcp_server, CreateTodoTool, db_session)
