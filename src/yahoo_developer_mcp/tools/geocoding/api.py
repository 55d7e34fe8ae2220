"""
Geocoding tools for yahoo-developer-mcp.

Forward geocoding (address to coordinates) and reverse geocoding
(coordinates to address) via the Yahoo! Geocoder APIs.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ...constants import GEOCODE_TOOL, REVERSE_GEOCODE_TOOL
from ...core.queries import build_geocode_query, build_reverse_geocode_query
from ...core.repository import MapRepository
from ...models.inputs import GeocodeInput, ReverseGeocodeInput
from ...models.responses import GeocodeResult, ReverseGeocodeResult
from ..base import Tool, run_tool

logger = logging.getLogger(__name__)


class GeocodeTool(Tool):
    name = GEOCODE_TOOL
    description = "Yahoo! Geocoder API - resolve an address string to coordinates"
    input_model = GeocodeInput
    input_schema = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Address string"},
        },
        "required": ["query"],
    }

    def __init__(self, repository: MapRepository):
        self._repository = repository

    async def execute(self, arguments: Mapping[str, Any] | None, app_id: str) -> GeocodeResult:
        params = self.parse_input(arguments)
        result = await self._repository.geocode(build_geocode_query(params, app_id))
        logger.debug("geocode returned %d item(s) for %r", len(result.items), params.query)
        return result


class ReverseGeocodeTool(Tool):
    name = REVERSE_GEOCODE_TOOL
    description = "Yahoo! Reverse Geocoder API - resolve coordinates to an address"
    input_model = ReverseGeocodeInput
    input_schema = {
        "type": "object",
        "properties": {
            "lat": {"type": "number", "description": "Latitude"},
            "lng": {"type": "number", "description": "Longitude"},
        },
        "required": ["lat", "lng"],
    }

    def __init__(self, repository: MapRepository):
        self._repository = repository

    async def execute(
        self, arguments: Mapping[str, Any] | None, app_id: str
    ) -> ReverseGeocodeResult:
        params = self.parse_input(arguments)
        return await self._repository.reverse_geocode(build_reverse_geocode_query(params, app_id))


def register_geocoding_tools(
    mcp,
    geocode_tool: GeocodeTool,
    reverse_tool: ReverseGeocodeTool,
    app_id: str | None,
):
    """Register geocoding tools with the MCP server."""

    @mcp.tool(name=GEOCODE_TOOL, description=geocode_tool.description)
    async def geocode(query: str, output_mode: str = "json") -> str:
        """Forward geocode an address to coordinates.

        Args:
            query: Address string (e.g. "東京都港区六本木")
            output_mode: "json" (default) or "text"

        Returns:
            Matching features with name, address, lat, and lng
        """
        return await run_tool(geocode_tool, {"query": query}, app_id, output_mode)

    @mcp.tool(name=REVERSE_GEOCODE_TOOL, description=reverse_tool.description)
    async def reverse_geocode(lat: float, lng: float, output_mode: str = "json") -> str:
        """Reverse geocode coordinates to an address.

        Args:
            lat: Latitude
            lng: Longitude
            output_mode: "json" (default) or "text"

        Returns:
            Features with name and address
        """
        return await run_tool(reverse_tool, {"lat": lat, "lng": lng}, app_id, output_mode)

    return geocode, reverse_geocode
