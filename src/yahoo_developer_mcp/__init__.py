"""Yahoo! JAPAN Map API tools (local search, geocoding, reverse geocoding) over MCP."""

__version__ = "0.1.0"
