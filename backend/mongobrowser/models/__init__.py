"""
Pydantic models for connection parameters and sessions.
"""
from mongobrowser.models.session import ConnectionParams, Session

__all__ = [
    "ConnectionParams",
    "Session",
]
