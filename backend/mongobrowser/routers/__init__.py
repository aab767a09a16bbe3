"""
API Routers module.
"""
from mongobrowser.routers import connections, health, tables

__all__ = ["connections", "health", "tables"]
