"""Starlette application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware

from .routes import create_routes

if TYPE_CHECKING:
    from ..context import AppContext

logger = logging.getLogger(__name__)


def create_app(context: AppContext) -> Starlette:
    """Create the Starlette application serving /mcp and the REST tool API."""

    @asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        yield
        # Release the upstream HTTP connection pool on shutdown
        await context.aclose()
        logger.info("Yahoo API client closed")

    app = Starlette(routes=create_routes(context), lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.config.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )
    return app
