"""MCP tools router: lists and invokes registered tools over HTTP."""
from fastapi import APIRouter, Body, HTTPException, status
from typing import Any, Dict

from todo_mcp.mcp.server import get_mcp_server

import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP Tools"])  # No prefix since main.py adds /mcp prefix


@router.get("/tools", response_model=Dict[str, Any])
async def list_tools():
    """List registered tools with their input schemas."""
    mcp_server = get_mcp_server()
    schemas = mcp_server.get_tool_schemas()
    return {
        "tools": list(schemas.values()),
        "count": len(schemas)
    }


@router.post("/tools/{tool_name}", response_model=Dict[str, Any])
async def invoke_tool(tool_name: str, arguments: Dict[str, Any] = Body(default={})):
    """Invoke a tool; tool failures come back in the standard error envelope."""
    mcp_server = get_mcp_server()

    if not mcp_server.has_tool(tool_name):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool {tool_name} not found"
        )

    return await mcp_server.invoke_tool(tool_name, **arguments)
