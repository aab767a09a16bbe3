"""
Dependencies for dependency injection in routes.
"""
from mongobrowser.dependencies.registry import (
    get_registry,
    get_schema_inspector,
    get_session,
)

__all__ = [
    "get_registry",
    "get_schema_inspector",
    "get_session",
]
