#!/usr/bin/env python3
"""
Async Yahoo Developer MCP Server using chuk-mcp-server

Local search, geocoding, and reverse geocoding via the Yahoo! JAPAN Map API.
The stdio transport runs on chuk-mcp-server; the HTTP transport is the
Starlette app built from the same services.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .config import AppConfig
from .constants import ServerConfig
from .context import AppContext
from .tools.geocoding import register_geocoding_tools
from .tools.search import register_search_tools
from .web import create_app

settings = AppConfig.from_env()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Shared services: one pagination store and one Yahoo client per process
context = AppContext.create(settings)

# Create the MCP server instance (stdio has no headers, so the app id is
# taken from the environment)
mcp = ChukMCPServer(ServerConfig.NAME)

register_search_tools(mcp, context.local_search, settings.yahoo_app_id)
register_geocoding_tools(
    mcp, context.geocode, context.reverse_geocode, settings.yahoo_app_id
)

# HTTP application (JSON-RPC + REST)
app = create_app(context)

# Run the server
if __name__ == "__main__":
    logger.info("Starting Yahoo Developer MCP Server...")
    mcp.run(stdio=True)
