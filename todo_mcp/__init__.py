"""Todo MCP server: a task-tracking backend exposed as MCP tools."""

__version__ = "1.0.0"
