"""
Registry and session dependencies for route handlers.
"""
from typing import Annotated

from fastapi import Depends, Path, Request

from mongobrowser.database.registry import SessionRegistry
from mongobrowser.models.session import Session
from mongobrowser.services.schema_inspector import SchemaInspector


def get_registry(request: Request) -> SessionRegistry:
    """Dependency returning the registry owned by the running app."""
    return request.app.state.registry


def get_schema_inspector(request: Request) -> SchemaInspector:
    """Dependency to get a SchemaInspector bound to the app settings."""
    return SchemaInspector(request.app.state.settings)


def get_session(
    connection_id: Annotated[str, Path(description="Connection identifier")],
    registry: Annotated[SessionRegistry, Depends(get_registry)],
) -> Session:
    """
    Dependency resolving the path's connection id to a live session.

    Raises:
        SessionNotFound: If the id is unknown or already closed
    """
    return registry.require(connection_id)


# Type aliases for cleaner route signatures
Registry = Annotated[SessionRegistry, Depends(get_registry)]
Inspector = Annotated[SchemaInspector, Depends(get_schema_inspector)]
ActiveSession = Annotated[Session, Depends(get_session)]
