"""Routers package for the Todo MCP server HTTP surface."""

from .tools import router as tools_router

__all__ = ["tools_router"]
