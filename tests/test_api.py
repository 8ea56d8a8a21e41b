"""HTTP surface: health check and tool endpoints."""
import pytest
from fastapi.testclient import TestClient

from todo_mcp.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_lists_tools(client):
    body = client.get("/mcp/tools").json()

    names = {tool["name"] for tool in body["tools"]}
    assert body["count"] == 14
    assert {"create-todo", "bulk-add-todos", "get-next-todo"} <= names


def test_invoke_tool_over_http(client):
    client.post("/mcp/tools/clear-all-todos", json={})

    created = client.post("/mcp/tools/create-todo", json={"title": "HTTP", "description": "via api"})
    assert created.status_code == 200
    todo = created.json()["data"]

    nxt = client.post("/mcp/tools/get-next-todo", json={}).json()
    assert nxt["data"]["id"] == todo["id"]

    duplicate = client.post("/mcp/tools/create-todo", json={"title": "HTTP", "description": "via api"})
    assert duplicate.status_code == 200
    assert duplicate.json()["error"]["code"] == "DUPLICATE_TODO"


def test_unknown_tool_is_404(client):
    response = client.post("/mcp/tools/does-not-exist", json={})

    assert response.status_code == 404
