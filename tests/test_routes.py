"""Tests for the HTTP surface: /mcp JSON-RPC endpoint and the REST tool API."""

import asyncio
import json

import pytest
from starlette.testclient import TestClient

from conftest import AUTH_HEADER
from yahoo_developer_mcp.errors import UpstreamError
from yahoo_developer_mcp.web import create_app, sse_events

AUTH = {"Authorization": AUTH_HEADER}


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as test_client:
        yield test_client


def rpc(method, params=None, id=1):
    message = {"jsonrpc": "2.0", "id": id, "method": method}
    if params is not None:
        message["params"] = params
    return message


class TestHealthAndInfo:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_server_info(self, client):
        data = client.get("/mcp").json()
        assert data["name"] == "yahoo-developer-mcp"
        assert data["capabilities"] == {"tools": True, "resources": False, "prompts": False}
        assert data["endpoints"]["invokeTool"] == "/mcp/tools/{toolName}"

    async def test_sse_events(self):
        events = sse_events(heartbeat_seconds=0)
        first = await events.__anext__()
        assert first.startswith("data: ")
        payload = json.loads(first[len("data: ") :].strip())
        assert payload["method"] == "initialized"
        assert payload["params"]["serverInfo"]["name"] == "yahoo-developer-mcp"
        assert await events.__anext__() == ": heartbeat\n\n"
        await events.aclose()

    async def test_sse_heartbeat_waits(self):
        events = sse_events(heartbeat_seconds=60)
        await events.__anext__()
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(events.__anext__(), timeout=0.05)


class TestMcpPost:
    def test_initialize(self, client):
        response = client.post("/mcp", json=rpc("initialize", {}))
        assert response.status_code == 200
        assert response.json()["result"]["protocolVersion"] == "2024-11-05"

    def test_notification_accepted(self, client):
        response = client.post(
            "/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"}
        )
        assert response.status_code == 202
        assert response.content == b""

    def test_method_not_found(self, client):
        response = client.post("/mcp", json=rpc("prompts/list", id="42"))
        assert response.status_code == 400
        body = response.json()
        assert body["id"] == "42"
        assert body["error"]["code"] == -32601

    def test_parse_error(self, client):
        response = client.post(
            "/mcp", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        body = response.json()
        assert body["id"] is None
        assert body["error"]["code"] == -32700

    def test_invalid_request(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 4})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32600

    def test_tools_call(self, client):
        response = client.post(
            "/mcp",
            json=rpc("tools/call", {"name": "geocode", "arguments": {"query": "六本木"}}),
            headers=AUTH,
        )
        assert response.status_code == 200
        text = response.json()["result"]["content"][0]["text"]
        assert json.loads(text)["items"][0]["lat"] == 35.66281

    def test_tools_call_without_auth(self, client, mock_repository):
        response = client.post(
            "/mcp", json=rpc("tools/call", {"name": "geocode", "arguments": {"query": "x"}})
        )
        assert response.status_code == 401
        assert response.json()["error"]["code"] == -32001
        mock_repository.geocode.assert_not_called()

    def test_tools_call_unknown_tool(self, client):
        response = client.post("/mcp", json=rpc("tools/call", {"name": "weather"}), headers=AUTH)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32602

    def test_tools_call_upstream_failure(self, client, mock_repository):
        mock_repository.reverse_geocode.side_effect = UpstreamError(502, "HTTP 502")
        response = client.post(
            "/mcp",
            json=rpc("tools/call", {"name": "reverseGeocode", "arguments": {"lat": 1, "lng": 2}}),
            headers=AUTH,
        )
        assert response.status_code == 200
        assert response.json()["result"]["isError"] is True

    def test_unexpected_error_is_internal(self, client, context, monkeypatch):
        async def boom(message, auth_header=None):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(context.dispatcher, "dispatch", boom)
        response = client.post("/mcp", json=rpc("tools/list", id=8))
        assert response.status_code == 500
        body = response.json()
        assert body["id"] == 8
        assert body["error"] == {"code": -32603, "message": "Internal error", "data": "kaboom"}


class TestRestToolApi:
    def test_list_tools(self, client):
        response = client.get("/mcp/tools", headers=AUTH)
        assert response.status_code == 200
        names = [t["name"] for t in response.json()["tools"]]
        assert names == ["localSearch", "geocode", "reverseGeocode"]

    def test_list_tools_requires_auth(self, client):
        response = client.get("/mcp/tools")
        assert response.status_code == 401
        assert "Bearer" in response.json()["error"]

    def test_invoke_tool(self, client, mock_repository):
        response = client.post(
            "/mcp/tools/localSearch", json={"query": "ramen", "sessionId": "r1"}, headers=AUTH
        )
        assert response.status_code == 200
        data = json.loads(response.json()["content"][0]["text"])
        assert data["nextOffset"] == 10
        assert mock_repository.local_search.call_args.args[0].appid == "test-app-id"

    def test_invoke_unknown_tool(self, client):
        response = client.post("/mcp/tools/weather", json={}, headers=AUTH)
        assert response.status_code == 404
        assert response.json() == {"error": "Unknown tool: weather"}

    def test_invoke_requires_auth(self, client):
        response = client.post("/mcp/tools/geocode", json={"query": "x"})
        assert response.status_code == 401

    def test_invoke_empty_bearer(self, client):
        response = client.post(
            "/mcp/tools/geocode", json={"query": "x"}, headers={"Authorization": "Bearer  "}
        )
        assert response.status_code == 401

    def test_invoke_non_object_body(self, client):
        response = client.post("/mcp/tools/geocode", json=[1, 2], headers=AUTH)
        assert response.status_code == 400

    def test_invoke_tool_failure(self, client):
        response = client.post("/mcp/tools/geocode", json={}, headers=AUTH)
        assert response.status_code == 200
        body = response.json()
        assert body["isError"] is True
        assert body["content"][0]["text"] == "Error: geocode requires query"


class TestCors:
    def test_allowed_origin(self, client):
        response = client.options(
            "/mcp",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestLifespan:
    def test_shutdown_closes_repository(self, context, mock_repository):
        with TestClient(create_app(context)):
            pass
        mock_repository.close.assert_awaited_once()
