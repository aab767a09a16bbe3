"""
Database module - MongoDB connections and the session registry.
"""
from mongobrowser.database.connections import build_connection_uri, open_client
from mongobrowser.database.registry import SessionRegistry

__all__ = [
    "build_connection_uri",
    "open_client",
    "SessionRegistry",
]
