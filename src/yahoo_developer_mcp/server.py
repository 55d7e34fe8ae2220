#!/usr/bin/env python3
"""
Yahoo Developer MCP Server - Entry Point

Provides Yahoo! Local Search, Geocoder, and Reverse Geocoder tools.
Supports both stdio (for desktop MCP clients) and HTTP (JSON-RPC at /mcp plus
a REST tool API) transports.
"""

import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .constants import EnvVar

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

# Import mcp instance, HTTP app, and settings from async server
from .async_server import app, mcp, settings  # noqa: F401, E402


def run_http(host: str, port: int) -> None:
    print(f"Yahoo Developer MCP Server starting in HTTP mode on {host}:{port}", file=sys.stderr)
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    parser = argparse.ArgumentParser(description="Yahoo Developer MCP Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode (stdio for desktop clients, http for API)",
    )
    parser.add_argument(
        "--host", default=settings.host, help=f"Host for HTTP mode (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port for HTTP mode (default: {settings.port})",
    )

    args = parser.parse_args()

    if args.mode == "stdio":
        print("Yahoo Developer MCP Server starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    elif args.mode == "http":
        run_http(args.host, args.port)
    else:
        if os.environ.get(EnvVar.MCP_STDIO) or (not sys.stdin.isatty()):
            print(
                "Yahoo Developer MCP Server starting in STDIO mode (auto-detected)",
                file=sys.stderr,
            )
            mcp.run(stdio=True)
        else:
            run_http(args.host, args.port)


if __name__ == "__main__":
    main()
