"""
List Todos MCP Tools

Lists every todo, or only the active (not completed) ones.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import EmptyInput


class ListTodosTool(BaseMCPTool):
    """MCP Tool for listing all todos"""

    name = "list-todos"
    description = "List all todos"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        todos = self.service.get_all_todos()
        return create_success_response(
            data={"todos": [todo.to_dict() for todo in todos], "total": len(todos)}
        )


class ListActiveTodosTool(BaseMCPTool):
    """MCP Tool for listing todos that are not completed"""

    name = "list-active-todos"
    description = "List all non-completed todos"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        todos = self.service.get_active_todos()
        return create_success_response(
            data={"todos": [todo.to_dict() for todo in todos], "total": len(todos)}
        )


def register_list_todos_tool(mcp_server, db_session: Session):
    """Register list-todos and list-active-todos tools with MCP server"""
    register_tool_class(mcp_server, ListTodosTool, db_session)
    register_tool_class(mcp_server, ListActiveTodosTool, db_session)
