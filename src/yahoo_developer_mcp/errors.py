"""
Error taxonomy for yahoo-developer-mcp.

Every protocol-visible error carries a JSON-RPC code, an HTTP status for the
REST surface, and the id of the message that caused it, so it can always be
rendered back into an error envelope.
"""

from typing import Any

from .constants import ErrorCode, ErrorMessages, ProtocolConfig

MessageId = str | int | None


class McpError(Exception):
    """Base class for errors surfaced to MCP clients."""

    code: int = ErrorCode.INTERNAL_ERROR
    http_status: int = 500

    def __init__(self, message: str, id: MessageId = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.id = id
        self.data = data

    def to_envelope(self) -> dict[str, Any]:
        """Render as a JSON-RPC error response."""
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return {"jsonrpc": ProtocolConfig.JSONRPC_VERSION, "id": self.id, "error": error}


class ParseError(McpError):
    code = ErrorCode.PARSE_ERROR
    http_status = 400


class InvalidRequestError(McpError):
    code = ErrorCode.INVALID_REQUEST
    http_status = 400


class ValidationError(McpError, ValueError):
    """Malformed tool input. Never retried."""

    code = ErrorCode.INVALID_PARAMS
    http_status = 400


class MethodNotFoundError(McpError):
    code = ErrorCode.METHOD_NOT_FOUND
    http_status = 400

    def __init__(self, method: str, id: MessageId = None):
        super().__init__(ErrorMessages.METHOD_NOT_FOUND.format(method), id=id)
        self.method = method


class UnknownToolError(McpError):
    code = ErrorCode.INVALID_PARAMS
    http_status = 400

    def __init__(self, name: str, id: MessageId = None):
        super().__init__(ErrorMessages.UNKNOWN_TOOL.format(name), id=id)
        self.name = name


class AuthenticationError(McpError):
    code = ErrorCode.UNAUTHORIZED
    http_status = 401


class UpstreamError(McpError):
    """Failure talking to the Yahoo API (network, non-2xx, bad body)."""

    code = ErrorCode.INTERNAL_ERROR
    http_status = 502

    def __init__(self, status: int, message: str, details: Any = None):
        super().__init__(message, data=details)
        self.status = status
        self.details = details


class DuplicateHandlerError(ValueError):
    """Raised at startup when two handlers or tools claim the same name."""


class ConfigurationError(ValueError):
    """Invalid environment configuration, raised at startup."""


def internal_error(exc: BaseException, id: MessageId = None) -> McpError:
    """Wrap an uncategorised exception in a generic internal-error envelope."""
    if isinstance(exc, McpError):
        if exc.id is None:
            exc.id = id
        return exc
    return McpError(ErrorMessages.INTERNAL_ERROR, id=id, data=str(exc))
