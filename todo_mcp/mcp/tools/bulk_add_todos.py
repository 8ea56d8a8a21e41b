"""
Bulk Add Todos MCP Tool

Creates one todo per file found recursively in a folder, using an inline
template or a template file for the description body.
"""

from typing import Dict, Any
from sqlmodel import Session
import os

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response, register_tool_class
from todo_mcp.schemas.todo import BulkAddTodosInput


def printable_path(file_path: str) -> str:
    """File names that are not valid UTF-8 get replacement characters so the response stays encodable"""
    return os.fsencode(file_path).decode("utf-8", errors="replace")


class BulkAddTodosTool(BaseMCPTool):
    """MCP Tool for folder-driven batch creation"""

    name = "bulk-add-todos"
    description = (
        "Create one todo per file in a folder (recursively). Each description gets a task "
        "number header, the file path, the template and completion instructions with the todo ID. "
        "Provide exactly one of template or templateFilePath."
    )
    input_model = BulkAddTodosInput

    async def execute(self, params: BulkAddTodosInput) -> Dict[str, Any]:
        result = self.service.bulk_add_todos(
            folder_path=params.folder_path,
            template=params.template,
            template_file_path=params.template_file_path,
        )

        message = f"Created {len(result.created)} todos from {params.folder_path}"
        if result.skipped:
            message += f", skipped {len(result.skipped)} files that already have todos"
        if result.failed:
            message += f", {len(result.failed)} failed"

        return create_success_response(
            data={
                "created": [todo.to_dict() for todo in result.created],
                "skipped": result.skipped,
                "failed": [{"filePath": printable_path(f.file_path), "error": f.error} for f in result.failed],
                "count": len(result.created),
            },
            message=message
        )


def register_bulk_add_todos_tool(mcp_server, db_session: Session):
    """Register bulk-add-todos tool with MCP server"""
    register_tool_class(mcp_server, BulkAddTodosTool, db_session)
