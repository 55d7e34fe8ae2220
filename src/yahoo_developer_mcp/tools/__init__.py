"""MCP tools exposed by yahoo-developer-mcp."""

from .base import Tool, run_tool
from .geocoding import GeocodeTool, ReverseGeocodeTool, register_geocoding_tools
from .registry import ToolRegistry
from .search import LocalSearchTool, register_search_tools

__all__ = [
    "GeocodeTool",
    "LocalSearchTool",
    "ReverseGeocodeTool",
    "Tool",
    "ToolRegistry",
    "register_geocoding_tools",
    "register_search_tools",
    "run_tool",
]
