"""
Collection listing and collection data response schemas.
"""
from typing import Any, Literal

from pydantic import BaseModel, Field

DataType = Literal[
    "string", "number", "boolean", "objectId", "date", "array", "object"
]


class TableInfo(BaseModel):
    """A collection visible in a database."""
    table_schema: str = Field(..., description="Database name")
    table_name: str = Field(..., description="Collection name")


class TablesResponse(BaseModel):
    """Collection listing response."""
    success: bool = Field(True, description="Whether the request succeeded")
    tables: list[TableInfo] = Field(default=[], description="Collections in the database")


class ColumnInfo(BaseModel):
    """Column inferred from the first document of a page."""
    column_name: str = Field(..., description="Field name")
    data_type: DataType = Field(..., description="Inferred type of the sampled value")


class TableDataResponse(BaseModel):
    """Paginated collection data response."""
    success: bool = Field(True, description="Whether the request succeeded")
    columns: list[ColumnInfo] = Field(default=[], description="Columns sampled from the first row")
    data: list[dict[str, Any]] = Field(default=[], description="Documents in the page")
    total: int = Field(..., description="Total number of documents in the collection")
