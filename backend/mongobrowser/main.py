"""
Mongo Browser Backend - FastAPI Application

Register a MongoDB connection, list its collections and page through their
documents over HTTP.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mongobrowser.config import Settings, get_settings
from mongobrowser.core.errors import BrowserError, browser_error_handler
from mongobrowser.core.logging import setup_logging
from mongobrowser.database.registry import SessionRegistry
from mongobrowser.routers import connections, health, tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Shutdown:
    - Close every session still registered
    """
    logger.info("Starting up Mongo Browser Backend...")

    yield

    logger.info("Shutting down Mongo Browser Backend...")
    closed = await app.state.registry.close_all()
    logger.info(f"Closed {closed} open session(s)")


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[SessionRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        registry: Session registry to inject (defaults to a new one)
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Mongo Browser API",
        description="""
## MongoDB Collection Browser API

### Flow
1. `POST /api/testConnection` with a connection string or host/port/database
   and receive a `connectionId`
2. `GET /api/tables/{connectionId}` to list collections
3. `GET /api/tableData/{connectionId}/{database}/{collection}?limit=100&offset=0`
   to page through documents
4. `DELETE /api/connections/{connectionId}` when done

Failures return `{"success": false, "message": ..., "error": ...}` with
status 400 (connect), 404 (unknown connection) or 500 (query/close).
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # An empty registry is falsy, so compare against None
    app.state.registry = registry if registry is not None else SessionRegistry(settings)

    app.add_exception_handler(BrowserError, browser_error_handler)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(connections.router)
    app.include_router(tables.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Mongo Browser API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
