"""HTTP transport: the /mcp JSON-RPC endpoint and the REST tool API."""

from .app import create_app
from .routes import create_routes, sse_events

__all__ = ["create_app", "create_routes", "sse_events"]
