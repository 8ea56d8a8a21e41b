"""
MCP Tools module for the Todo server
Contains all MCP tool definitions for todo operations
"""
from sqlmodel import Session

from .create_todo import register_create_todo_tool
from .get_todo import register_get_todo_tool
from .update_todo import register_update_todo_tool
from .complete_todo import register_complete_todo_tool
from .delete_todo import register_delete_todo_tool
from .update_status import register_update_status_tool
from .bulk_add_todos import register_bulk_add_todos_tool
from .clear_all_todos import register_clear_all_todos_tool
from .get_next_todo import register_get_next_todo_tool
from .list_todos import register_list_todos_tool
from .search_todos import register_search_todos_tool
from .summarize_todos import register_summarize_todos_tool


def register_all_tools(mcp_server, db_session: Session):
    """Register every todo tool with the MCP server, bound to one session."""
    register_create_todo_tool(mcp_server, db_session)
    register_list_todos_tool(mcp_server, db_session)
    register_get_todo_tool(mcp_server, db_session)
    register_update_todo_tool(mcp_server, db_session)
    register_complete_todo_tool(mcp_server, db_session)
    register_delete_todo_tool(mcp_server, db_session)
    register_search_todos_tool(mcp_server, db_session)
    register_summarize_todos_tool(mcp_server, db_session)
    register_bulk_add_todos_tool(mcp_server, db_session)
    register_update_status_tool(mcp_server, db_session)
    register_get_next_todo_tool(mcp_server, db_session)
    register_clear_all_todos_tool(mcp_server, db_session)
    return mcp_server.list_tools()


__all__ = ["register_all_tools"]
