"""Shared fixtures: every test gets its own in-memory SQLite database."""
import asyncio
import os

# Must be set before todo_mcp.db.config builds the process-wide engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlmodel import Session

from todo_mcp.db.config import create_db_engine
from todo_mcp.db.init import init_db
from todo_mcp.mcp.server import MCPServer
from todo_mcp.mcp.tools import register_all_tools
from todo_mcp.services.todo_service import TodoService


@pytest.fixture
def engine():
    db_engine = create_db_engine("sqlite://")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def service(session):
    return TodoService(session)


@pytest.fixture
def registry(session):
    mcp_server = MCPServer("test-todo-server")
    register_all_tools(mcp_server, session)
    return mcp_server


@pytest.fixture
def call_tool(registry):
    """Invoke a registered tool synchronously."""
    def _call(name, **arguments):
        return asyncio.run(registry.invoke_tool(name, **arguments))
    return _call


@pytest.fixture
def task_folder(tmp_path):
    """A folder holding a.txt and b.txt."""
    folder = tmp_path / "tasks"
    folder.mkdir()
    (folder / "a.txt").write_text("first file")
    (folder / "b.txt").write_text("second file")
    return folder
