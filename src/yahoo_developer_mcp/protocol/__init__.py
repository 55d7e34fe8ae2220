"""JSON-RPC method dispatch for the MCP endpoint."""

from .dispatcher import MethodDispatcher, create_dispatcher
from .handlers import (
    InitializeHandler,
    LoggingSetLevelHandler,
    MethodHandler,
    NotificationHandler,
    NotificationsInitializedHandler,
    RequestHandler,
    ToolsCallHandler,
    ToolsListHandler,
)

__all__ = [
    "InitializeHandler",
    "LoggingSetLevelHandler",
    "MethodDispatcher",
    "MethodHandler",
    "NotificationHandler",
    "NotificationsInitializedHandler",
    "RequestHandler",
    "ToolsCallHandler",
    "ToolsListHandler",
    "create_dispatcher",
]
