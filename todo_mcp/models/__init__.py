"""
Models module for the Todo MCP server
Contains the persisted todo entity
"""
from .todo import Todo, TodoStatus, utc_now_iso

__all__ = [
    "Todo",
    "TodoStatus",
    "utc_now_iso",
]
