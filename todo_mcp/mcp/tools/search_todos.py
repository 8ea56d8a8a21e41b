"""
Search Todos MCP Tools

Searches todos by title (case-insensitive substring) or by creation date.
"""

from typing import Dict, Any
from sqlmodel import Session

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import SearchByDateInput, SearchByTitleInput


class SearchTodosByTitleTool(BaseMCPTool):
    """MCP Tool for title search"""

    name = "search-todos-by-title"
    description = "Search todos by title (case-insensitive partial match)"
    input_model = SearchByTitleInput

    async def execute(self, params: SearchByTitleInput) -> Dict[str, Any]:
        todos = self.service.search_by_title(params.title)
        return create_success_response(
            data={"todos": [todo.to_dict() for todo in todos], "query": params.title, "total": len(todos)}
        )


class SearchTodosByDateTool(BaseMCPTool):
    """MCP Tool for creation-date search"""

    name = "search-todos-by-date"
    description = "Search todos by creation date (format: YYYY-MM-DD)"
    input_model = SearchByDateInput

    async def execute(self, params: SearchByDateInput) -> Dict[str, Any]:
        todos = self.service.search_by_date(params.date)
        return create_success_response(
            data={"todos": [todo.to_dict() for todo in todos], "date": params.date, "total": len(todos)}
        )


def register_search_todos_tool(mcp_server, db_session: Session):
    """Register the title and date search tools with MCP server"""
    register_tool_class(mcp_server, SearchTodosByTitleTool, db_session)
    register_tool_class(mcp_server, SearchTodosByDateTool, db_session)
