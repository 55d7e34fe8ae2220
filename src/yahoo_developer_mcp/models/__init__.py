"""Request and response models for yahoo-developer-mcp."""

from .inputs import GeocodeInput, LocalSearchInput, ReverseGeocodeInput, ToolInput
from .responses import (
    ErrorResponse,
    GeocodeItem,
    GeocodeResult,
    JsonRpcMessage,
    LocalSearchItem,
    LocalSearchResult,
    ReverseGeocodeItem,
    ReverseGeocodeResult,
    ServerInfo,
    TextContent,
    ToolCallResult,
    ToolDefinition,
    format_response,
)

__all__ = [
    "ErrorResponse",
    "GeocodeInput",
    "GeocodeItem",
    "GeocodeResult",
    "JsonRpcMessage",
    "LocalSearchInput",
    "LocalSearchItem",
    "LocalSearchResult",
    "ReverseGeocodeInput",
    "ReverseGeocodeItem",
    "ReverseGeocodeResult",
    "ServerInfo",
    "TextContent",
    "ToolCallResult",
    "ToolDefinition",
    "ToolInput",
    "format_response",
]
