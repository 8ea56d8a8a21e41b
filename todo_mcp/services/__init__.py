"""
Services module for the Todo MCP server
Contains the business logic layer
"""
from .todo_service import TodoService, BulkAddResult, BulkAddFailure

__all__ = [
    "TodoService",
    "BulkAddResult",
    "BulkAddFailure",
]
