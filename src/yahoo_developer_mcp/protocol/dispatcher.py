"""
JSON-RPC method dispatch.

A dispatcher is a fixed map from method name to handler, validated for
duplicates when it is built. Dispatch is a pure lookup: any registered method
may be called at any time.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pydantic

from ..constants import ErrorMessages
from ..errors import DuplicateHandlerError, InvalidRequestError, McpError, MethodNotFoundError
from ..models.responses import JsonRpcMessage
from ..tools.registry import ToolRegistry
from .handlers import (
    InitializeHandler,
    LoggingSetLevelHandler,
    MethodHandler,
    NotificationHandler,
    NotificationsInitializedHandler,
    ToolsCallHandler,
    ToolsListHandler,
)

logger = logging.getLogger(__name__)


class MethodDispatcher:
    def __init__(self, handlers: Iterable[MethodHandler]):
        self._handlers: dict[str, MethodHandler] = {}
        for handler in handlers:
            if handler.method in self._handlers:
                raise DuplicateHandlerError(ErrorMessages.DUPLICATE_HANDLER.format(handler.method))
            self._handlers[handler.method] = handler

    @property
    def methods(self) -> list[str]:
        return list(self._handlers)

    def is_notification(self, method: str) -> bool:
        return isinstance(self._handlers.get(method), NotificationHandler)

    @staticmethod
    def parse(message: Mapping[str, Any]) -> JsonRpcMessage:
        """Validate a raw JSON-RPC object.

        Raises:
            InvalidRequestError: If it is not a well-formed request
        """
        if not isinstance(message, Mapping):
            raise InvalidRequestError(ErrorMessages.INVALID_REQUEST.format("expected an object"))
        try:
            return JsonRpcMessage.model_validate(dict(message))
        except pydantic.ValidationError as e:
            msg_id = message.get("id")
            raise InvalidRequestError(
                ErrorMessages.INVALID_REQUEST.format(e.errors()[0]["msg"]),
                id=msg_id if isinstance(msg_id, (str, int)) else None,
            ) from e

    async def dispatch(
        self,
        message: JsonRpcMessage | Mapping[str, Any],
        auth_header: str | None = None,
    ) -> dict[str, Any] | None:
        """Route message to its handler.

        Args:
            message: Parsed message, or a raw JSON-RPC object
            auth_header: Authorization header of the request, passed through
                to handlers that need the caller's app id

        Returns:
            The response envelope, or None for notifications

        Raises:
            MethodNotFoundError: If no handler is registered for message.method
            McpError: Any protocol-level error raised by the handler, tagged
                with the message id
        """
        if not isinstance(message, JsonRpcMessage):
            message = self.parse(message)

        handler = self._handlers.get(message.method)
        if handler is None:
            raise MethodNotFoundError(message.method, id=message.id)

        logger.debug("Dispatching %s (id=%r)", message.method, message.id)
        try:
            return await handler.handle(message, auth_header)
        except McpError as e:
            if e.id is None:
                e.id = message.id
            raise


def create_dispatcher(registry: ToolRegistry) -> MethodDispatcher:
    """Dispatcher with the standard MCP method set."""
    return MethodDispatcher(
        [
            InitializeHandler(),
            NotificationsInitializedHandler(),
            LoggingSetLevelHandler(),
            ToolsListHandler(registry),
            ToolsCallHandler(registry),
        ]
    )
