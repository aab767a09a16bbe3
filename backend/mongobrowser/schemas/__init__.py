"""
Request and response schemas for API endpoints.
"""
from mongobrowser.schemas.connection import (
    ConnectRequest,
    ConnectResponse,
    CloseResponse,
    ErrorResponse,
)
from mongobrowser.schemas.table import (
    ColumnInfo,
    TableDataResponse,
    TableInfo,
    TablesResponse,
)

__all__ = [
    # Connection
    "ConnectRequest",
    "ConnectResponse",
    "CloseResponse",
    "ErrorResponse",
    # Tables
    "ColumnInfo",
    "TableDataResponse",
    "TableInfo",
    "TablesResponse",
]
