"""
Service layer for collection inspection.
"""
from mongobrowser.services.schema_inspector import SchemaInspector

__all__ = [
    "SchemaInspector",
]
