"""
Tool input models for yahoo-developer-mcp.

Field names follow the wire format (camelCase) via aliases; Python code uses
snake_case. Cross-field requirements ("query or lat+lng") are enforced by the
query builders so that they fail with the project's own ValidationError.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class LocalSearchInput(ToolInput):
    """Arguments for the localSearch tool."""

    query: str | None = Field(None, description="Keyword to search for")
    lat: float | None = Field(None, description="Latitude for coordinate search")
    lng: float | None = Field(None, description="Longitude for coordinate search")
    session_id: str | None = Field(None, description="Session id for paging continuity")
    offset: int | None = Field(None, ge=0, description="Explicit 0-based offset override")
    reset: bool | None = Field(None, description="Restart the paging sequence")
    results: int | None = Field(None, description="Page size (default 10)")

    @property
    def has_target(self) -> bool:
        return bool(self.query) or (self.lat is not None and self.lng is not None)


class GeocodeInput(ToolInput):
    """Arguments for the geocode tool."""

    query: str | None = Field(None, description="Address string to geocode")


class ReverseGeocodeInput(ToolInput):
    """Arguments for the reverseGeocode tool."""

    lat: float | None = Field(None, description="Latitude")
    lng: float | None = Field(None, description="Longitude")
