"""
Local search tool for yahoo-developer-mcp.

Keyword or coordinate search over the Yahoo! Local Search API, with
session-scoped paging.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ...constants import LOCAL_SEARCH_TOOL
from ...core.pagination import PaginationStore
from ...core.queries import build_local_search_query
from ...core.repository import MapRepository
from ...models.inputs import LocalSearchInput
from ...models.responses import LocalSearchResult
from ..base import Tool, run_tool

logger = logging.getLogger(__name__)


class LocalSearchTool(Tool):
    name = LOCAL_SEARCH_TOOL
    description = (
        "Yahoo! Local Search API - search places by keyword or coordinates "
        "(pages of 10 by default; pass sessionId to page through results)"
    )
    input_model = LocalSearchInput
    input_schema = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Keyword to search for"},
            "lat": {"type": "number", "description": "Latitude (coordinate search)"},
            "lng": {"type": "number", "description": "Longitude (coordinate search)"},
            "sessionId": {
                "type": "string",
                "description": "Session id; repeated calls with the same id return the next page",
            },
            "offset": {"type": "number", "description": "Explicit 0-based offset"},
            "reset": {"type": "boolean", "description": "Restart paging from the first page"},
            "results": {"type": "number", "description": "Page size (default 10)"},
        },
        "anyOf": [{"required": ["query"]}, {"required": ["lat", "lng"]}],
    }

    def __init__(self, repository: MapRepository, store: PaginationStore):
        self._repository = repository
        self._store = store

    async def execute(self, arguments: Mapping[str, Any] | None, app_id: str) -> LocalSearchResult:
        params = self.parse_input(arguments)
        query, next_offset = build_local_search_query(params, app_id, self._store)
        # The cursor has already advanced here; an upstream failure still
        # consumes the page.
        result = await self._repository.local_search(query)
        logger.debug("localSearch returned %d item(s)", len(result.items))
        if not result.items:
            next_offset = None
        return result.model_copy(update={"next_offset": next_offset})


def register_search_tools(mcp, tool: LocalSearchTool, app_id: str | None):
    """Register the local search tool with the MCP server."""

    @mcp.tool(name=LOCAL_SEARCH_TOOL, description=tool.description)
    async def local_search(
        query: str | None = None,
        lat: float | None = None,
        lng: float | None = None,
        sessionId: str | None = None,  # noqa: N803
        offset: int | None = None,
        reset: bool | None = None,
        results: int | None = None,
        output_mode: str = "json",
    ) -> str:
        """Search places by keyword or coordinates via Yahoo! Local Search.

        Args:
            query: Keyword to search for (e.g. "ramen")
            lat: Latitude for coordinate search
            lng: Longitude for coordinate search
            sessionId: Reuse across calls to get successive pages
            offset: Explicit 0-based offset override
            reset: Restart paging for this session and query
            results: Page size (default 10)
            output_mode: "json" (default) or "text"

        Returns:
            JSON with items, nextOffset (when paging), and the raw response
        """
        arguments = {
            "query": query,
            "lat": lat,
            "lng": lng,
            "sessionId": sessionId,
            "offset": offset,
            "reset": reset,
            "results": results,
        }
        return await run_tool(tool, arguments, app_id, output_mode)

    return local_search
