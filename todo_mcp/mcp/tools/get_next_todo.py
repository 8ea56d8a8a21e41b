"""
Get Next Todo MCP Tool

Returns the lowest-numbered todo that is not Done.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response, register_tool_class
from todo_mcp.schemas.todo import EmptyInput


class GetNextTodoTool(BaseMCPTool):
    """MCP Tool for the work queue"""

    name = "get-next-todo"
    description = "Get the next todo to work on (lowest task number not marked Done)"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        todo = self.service.get_next_todo()
        if todo is None:
            raise MCPToolError(code="NOT_FOUND", message="No pending todos found")

        return create_success_response(
            data=todo.to_dict(),
            message=f"Next todo is task {todo.task_number}"
        )


def register_get_next_todo_tool(mcp_server, db_session: Session):
    """Register get-next-todo tool with MCP server"""
    register_tool_class(mcp_server, GetNextTodoTool, db_session)
