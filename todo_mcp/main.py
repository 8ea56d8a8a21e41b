"""Main FastAPI application exposing the todo MCP tools over HTTP."""
import logging
import os

from fastapi import FastAPI
from sqlmodel import Session

from todo_mcp import __version__
from todo_mcp.db.config import engine
from todo_mcp.db.init import init_db
from todo_mcp.mcp.server import get_mcp_server
from todo_mcp.mcp.tools import register_all_tools
from todo_mcp.middleware.cors import add_cors_middleware
from todo_mcp.routers import tools_router
from todo_mcp.utils.logger import LOG_LEVEL

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Todo MCP Server",
    description="Task-tracking backend exposed as Model Context Protocol tools",
    version=__version__,
)

# Add CORS middleware
add_cors_middleware(app)

# Session shared by every tool for the lifetime of the process
_db_session: Session = None


@app.on_event("startup")
async def startup_event():
    """Initialize database and MCP tools on startup."""
    global _db_session

    init_db(engine)

    mcp_server = get_mcp_server()
    _db_session = Session(engine)
    tools = register_all_tools(mcp_server, _db_session)
    logger.info(f"[SUCCESS] MCP Server initialized with tools: {tools}")


@app.on_event("shutdown")
async def shutdown_event():
    """Release the shared session and the engine."""
    global _db_session

    if _db_session is not None:
        _db_session.close()
        _db_session = None
    engine.dispose()
    logger.info("Database connection closed")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Todo MCP Server",
        "title": "Todo MCP Server",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "tools": "/mcp/tools",
    }


app.include_router(tools_router, prefix="/mcp")  # Tool endpoints: /mcp/tools, /mcp/tools/{tool_name}


def run():
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(
        "todo_mcp.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
