"""HTTP routes for the MCP endpoint and the REST tool API.

POST /mcp speaks JSON-RPC: dispatcher failures come back as JSON-RPC error
envelopes, tool failures as results flagged isError. The /mcp/tools routes
are a plain REST view of the same tool registry.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from starlette.requests import Request
from starlette.responses import JSONResponse, Response, StreamingResponse
from starlette.routing import Route

from ..auth import extract_app_id
from ..constants import ErrorMessages, ProtocolConfig, ServerConfig
from ..errors import McpError, ParseError, UnknownToolError, ValidationError, internal_error
from ..models.responses import ErrorResponse, ServerInfo, ToolCallResult

if TYPE_CHECKING:
    from ..context import AppContext

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


def _message_id(body: Any) -> str | int | None:
    if isinstance(body, dict):
        msg_id = body.get("id")
        if isinstance(msg_id, (str, int)):
            return msg_id
    return None


async def sse_events(
    heartbeat_seconds: float = ProtocolConfig.SSE_HEARTBEAT_SECONDS,
) -> AsyncIterator[str]:
    """Server-sent events: one initialized notification, then heartbeats forever."""
    initialized = {
        "jsonrpc": ProtocolConfig.JSONRPC_VERSION,
        "method": "initialized",
        "params": {
            "serverInfo": {"name": ServerConfig.NAME, "version": ServerConfig.VERSION},
            "capabilities": {"tools": {"listChanged": False}},
        },
    }
    yield f"data: {json.dumps(initialized)}\n\n"
    while True:
        await asyncio.sleep(heartbeat_seconds)
        yield ": heartbeat\n\n"


def create_routes(context: AppContext) -> list[Route]:
    """Create HTTP routes bound to the application context."""
    dispatcher = context.dispatcher
    registry = context.registry

    async def health(request: Request) -> JSONResponse:
        _ = request  # unused
        return JSONResponse({"status": "healthy", "version": ServerConfig.VERSION})

    async def mcp_info(request: Request) -> Response:
        """Server description, or an SSE stream when the client asks for one."""
        if "text/event-stream" in request.headers.get("accept", ""):
            logger.debug("SSE connection requested")
            return StreamingResponse(
                sse_events(),
                media_type="text/event-stream",
                headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
            )
        logger.debug("MCP base endpoint accessed")
        return JSONResponse(ServerInfo().to_wire())

    async def mcp_post(request: Request) -> Response:
        """Dispatch one JSON-RPC message."""
        try:
            body = await request.json()
        except ValueError as e:
            err = ParseError(ErrorMessages.PARSE_ERROR.format(e))
            return JSONResponse(err.to_envelope(), status_code=err.http_status)

        msg_id = _message_id(body)
        logger.debug("MCP POST message: %s", body)
        try:
            response = await dispatcher.dispatch(body, request.headers.get("authorization"))
        except McpError as e:
            logger.warning("MCP message failed: %s", e)
            return JSONResponse(e.to_envelope(), status_code=e.http_status)
        except Exception as e:
            logger.exception("MCP message handling error")
            err = internal_error(e, msg_id)
            return JSONResponse(err.to_envelope(), status_code=err.http_status)

        if response is None:
            return Response(status_code=202)
        return JSONResponse(response)

    async def list_tools(request: Request) -> JSONResponse:
        try:
            extract_app_id(request.headers.get("authorization"))
        except McpError as e:
            return _error(e.message, e.http_status)
        return JSONResponse({"tools": [d.to_wire() for d in registry.definitions()]})

    async def invoke_tool(request: Request) -> JSONResponse:
        tool_name = request.path_params["tool_name"]
        try:
            app_id = extract_app_id(request.headers.get("authorization"))
            tool = registry.get(tool_name)
        except UnknownToolError as e:
            return _error(e.message, 404)
        except McpError as e:
            return _error(e.message, e.http_status)

        raw = await request.body()
        try:
            arguments = json.loads(raw) if raw else {}
            if not isinstance(arguments, dict):
                raise ValidationError(
                    ErrorMessages.INVALID_INPUT.format(tool_name, "expected an object")
                )
        except ValueError as e:
            return _error(str(e), 400)

        logger.debug("Tool invocation: %s with input: %s", tool_name, arguments)
        try:
            result = await tool.execute(arguments, app_id)
            payload = ToolCallResult.from_result(result)
        except Exception as e:
            logger.error("Tool execution error in %s: %s", tool_name, e)
            payload = ToolCallResult.from_error(e)
        return JSONResponse(payload.to_wire())

    return [
        Route("/health", health, methods=["GET"]),
        Route("/mcp", mcp_info, methods=["GET"]),
        Route("/mcp", mcp_post, methods=["POST"]),
        Route("/mcp/tools", list_tools, methods=["GET"]),
        Route("/mcp/tools/{tool_name}", invoke_tool, methods=["POST"]),
    ]
