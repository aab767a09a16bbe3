"""
Connection request/response schemas.
"""
from pydantic import BaseModel, Field

from mongobrowser.models.session import ConnectionParams


class ConnectRequest(ConnectionParams):
    """Open connection request."""


class ConnectResponse(BaseModel):
    """Successful connection response."""
    success: bool = Field(True, description="Whether the connection succeeded")
    message: str = Field("Connection successful", description="Status message")
    connection_id: str = Field(..., alias="connectionId", description="Session identifier")

    class Config:
        populate_by_name = True


class CloseResponse(BaseModel):
    """Connection close response."""
    success: bool = Field(True, description="Whether the connection was closed")
    message: str = Field("Connection closed successfully", description="Status message")


class ErrorResponse(BaseModel):
    """Error body shared by every failing operation."""
    success: bool = Field(False, description="Always false")
    message: str = Field(..., description="Operation-level failure message")
    error: str = Field(..., description="Underlying failure message")
