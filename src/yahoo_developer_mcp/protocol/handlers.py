"""
MCP method handlers.

Each handler owns exactly one JSON-RPC method name. Request handlers return a
response envelope; notification handlers return None.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..auth import extract_app_id
from ..constants import MCP_LOG_LEVELS, ErrorMessages, ProtocolConfig, ServerConfig
from ..errors import ValidationError
from ..models.responses import JsonRpcMessage, ToolCallResult
from ..tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "yahoo_developer_mcp"


class MethodHandler(ABC):
    method: ClassVar[str]

    @abstractmethod
    async def handle(
        self, message: JsonRpcMessage, auth_header: str | None = None
    ) -> dict[str, Any] | None: ...


class RequestHandler(MethodHandler):
    """Handler for a method that expects a response."""

    @staticmethod
    def respond(message: JsonRpcMessage, result: Any) -> dict[str, Any]:
        return {"jsonrpc": ProtocolConfig.JSONRPC_VERSION, "id": message.id, "result": result}

    @abstractmethod
    async def handle(
        self, message: JsonRpcMessage, auth_header: str | None = None
    ) -> dict[str, Any]: ...


class NotificationHandler(MethodHandler):
    """Handler for a fire-and-forget notification. Never responds."""

    @abstractmethod
    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> None: ...


class InitializeHandler(RequestHandler):
    method = "initialize"

    def __init__(self, name: str = ServerConfig.NAME, version: str = ServerConfig.VERSION):
        self._name = name
        self._version = version

    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> dict:
        logger.info("Handling MCP initialize request")
        return self.respond(
            message,
            {
                "protocolVersion": ProtocolConfig.PROTOCOL_VERSION,
                "capabilities": {
                    "tools": {"listChanged": False},
                    "logging": {"levels": list(ProtocolConfig.LOGGING_LEVELS)},
                },
                "serverInfo": {"name": self._name, "version": self._version},
            },
        )


class NotificationsInitializedHandler(NotificationHandler):
    method = "notifications/initialized"

    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> None:
        logger.info("MCP client initialized")


class LoggingSetLevelHandler(RequestHandler):
    """Applies an MCP log level to the package logger."""

    method = "logging/setLevel"

    def __init__(self, logger_name: str = PACKAGE_LOGGER):
        self._logger_name = logger_name

    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> dict:
        requested = str((message.params or {}).get("level") or "info").lower()
        level = MCP_LOG_LEVELS.get(requested)
        if level is None:
            raise ValidationError(ErrorMessages.UNKNOWN_LOG_LEVEL.format(requested), id=message.id)
        logging.getLogger(self._logger_name).setLevel(level)
        logger.info("Log level set to %s", level)
        return self.respond(message, {})


class ToolsListHandler(RequestHandler):
    method = "tools/list"

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> dict:
        return self.respond(
            message, {"tools": [d.to_wire() for d in self._registry.definitions()]}
        )


class ToolsCallHandler(RequestHandler):
    """Runs a tool. Tool failures become isError results, never protocol errors."""

    method = "tools/call"

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    async def handle(self, message: JsonRpcMessage, auth_header: str | None = None) -> dict:
        params = message.params or {}
        name = params.get("name")
        if not name:
            raise ValidationError(ErrorMessages.MISSING_TOOL_NAME, id=message.id)
        app_id = extract_app_id(auth_header, id=message.id)
        tool = self._registry.get(str(name), id=message.id)

        try:
            result = await tool.execute(params.get("arguments"), app_id)
            payload = ToolCallResult.from_result(result)
        except Exception as e:
            logger.error("Tool execution error in %s: %s", tool.name, e, exc_info=True)
            payload = ToolCallResult.from_error(e)
        return self.respond(message, payload.to_wire())
