"""
Response models for yahoo-developer-mcp.

Tool results, tool definitions, and MCP envelopes are Pydantic models so every
response is serialised the same way (camelCase on the wire, None omitted).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..constants import ProtocolConfig, ServerConfig


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    if isinstance(model, WireModel):
        return model.to_json()
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return f"Error: {self.error}"


# --- Tool results ---


class LocalSearchItem(WireModel):
    """A single local search hit."""

    id: str | None = Field(None, description="Item identifier (the place name)")
    name: str | None = Field(None, description="Place name")
    address: str | None = Field(None, description="Address")
    lat: float | None = Field(None, description="Latitude")
    lng: float | None = Field(None, description="Longitude")
    category: str | None = Field(None, description="Genre name")
    tel: str | None = Field(None, description="Phone number")

    def to_text(self) -> str:
        parts = [self.name or "(unnamed)"]
        if self.address:
            parts.append(f"  Address: {self.address}")
        if self.lat is not None and self.lng is not None:
            parts.append(f"  Coordinates: {self.lat:.6f}, {self.lng:.6f}")
        if self.category:
            parts.append(f"  Category: {self.category}")
        if self.tel:
            parts.append(f"  Tel: {self.tel}")
        return "\n".join(parts)


class LocalSearchResult(WireModel):
    """Flattened local search response."""

    items: list[LocalSearchItem] = Field(default_factory=list)
    next_offset: int | None = Field(None, description="Offset of the next page, if paging")
    raw: dict[str, Any] = Field(default_factory=dict, description="Upstream response body")

    def to_text(self) -> str:
        lines = [f"{len(self.items)} item(s)", ""]
        for i, item in enumerate(self.items, 1):
            lines.append(f"{i}. {item.to_text()}")
        if self.next_offset is not None:
            lines.append(f"Next offset: {self.next_offset}")
        return "\n".join(lines)


class GeocodeItem(WireModel):
    """A single forward geocoding hit."""

    name: str | None = Field(None, description="Feature name")
    address: str = Field("", description="Address")
    lat: float | None = Field(None, description="Latitude")
    lng: float | None = Field(None, description="Longitude")


class GeocodeResult(WireModel):
    """Flattened geocoder response."""

    items: list[GeocodeItem] = Field(default_factory=list)
    raw: dict[str, Any] = Field(default_factory=dict)

    def to_text(self) -> str:
        lines = [f"{len(self.items)} item(s)"]
        for item in self.items:
            coords = ""
            if item.lat is not None and item.lng is not None:
                coords = f" ({item.lat:.6f}, {item.lng:.6f})"
            lines.append(f"- {item.address}{coords}")
        return "\n".join(lines)


class ReverseGeocodeItem(WireModel):
    """A single reverse geocoding hit."""

    name: str | None = Field(None, description="Feature name")
    address: str | None = Field(None, description="Address")


class ReverseGeocodeResult(WireModel):
    """Flattened reverse geocoder response."""

    items: list[ReverseGeocodeItem] = Field(default_factory=list)
    raw: dict[str, Any] = Field(default_factory=dict)

    def to_text(self) -> str:
        return "\n".join(f"- {item.address or item.name or '(unknown)'}" for item in self.items)


# --- MCP protocol shapes ---


class ToolDefinition(WireModel):
    """Name, description, and JSON schema of an invocable tool."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    name: str
    description: str
    input_schema: dict[str, Any]


class TextContent(WireModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(WireModel):
    """Payload of a tools/call result."""

    content: list[TextContent]
    is_error: bool | None = None

    @classmethod
    def from_result(cls, result: BaseModel) -> "ToolCallResult":
        text = result.to_json() if isinstance(result, WireModel) else result.model_dump_json()
        return cls(content=[TextContent(text=text)])

    @classmethod
    def from_error(cls, error: BaseException) -> "ToolCallResult":
        return cls(content=[TextContent(text=f"Error: {error}")], is_error=True)


class JsonRpcMessage(BaseModel):
    """Inbound JSON-RPC request or notification."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: str | None = ProtocolConfig.JSONRPC_VERSION
    id: str | int | None = None
    method: str
    params: dict[str, Any] | None = None


class ServerCapabilities(WireModel):
    tools: bool = True
    resources: bool = False
    prompts: bool = False


class ServerEndpoints(WireModel):
    tools: str = "/mcp/tools"
    list_tools: str = "/mcp/tools"
    invoke_tool: str = "/mcp/tools/{toolName}"


class ServerInfo(WireModel):
    """Answer to GET /mcp for plain HTTP clients."""

    name: str = ServerConfig.NAME
    version: str = ServerConfig.VERSION
    description: str = ServerConfig.DESCRIPTION
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    endpoints: ServerEndpoints = Field(default_factory=ServerEndpoints)
