"""
Update Status MCP Tool

Sets a todo's status to New or Done without touching its completion timestamp.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import UpdateStatusInput


class UpdateStatusTool(BaseMCPTool):
    """MCP Tool for changing a todo's status"""

    name = "update-status"
    description = "Update the status of a todo (New or Done)"
    input_model = UpdateStatusInput

    async def execute(self, params: UpdateStatusInput) -> Dict[str, Any]:
        todo = self.service.update_status(params.todo_id, params.status)
        todo = self.require_todo(todo, params.todo_id)

        return create_success_response(
            data=todo.to_dict(),
            message=f"Todo status set to {params.status}"
        )


def register_update_status_tool(mcp_server, db_session: Session):
    """Register update-status tool with MCP server"""
    register_tool_class(mcp_server, UpdateStatusTool, db_session)
