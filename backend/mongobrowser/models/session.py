"""
Connection parameters and the Session value object.
"""
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, Field

DEFAULT_DATABASE = "test"


class ConnectionParams(BaseModel):
    """
    Connection request as sent by the client.

    Either ``connectionString`` is given and used verbatim, or the target is
    composed from host/port/database and optional credentials.
    """
    connection_string: Optional[str] = Field(
        None, alias="connectionString", description="Raw MongoDB connection URI"
    )
    host: Optional[str] = Field(None, description="Server host name")
    port: Optional[int] = Field(None, ge=1, le=65535, description="Server port (default 27017)")
    database: Optional[str] = Field(None, description="Database to browse")
    user: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password")

    class Config:
        populate_by_name = True
        extra = "ignore"


class Session(BaseModel):
    """
    A live, registry-tracked database connection.

    Immutable; only the handle's own internal state changes.
    """
    id: str = Field(..., description="Opaque server-generated identifier")
    handle: Any = Field(..., description="Open MongoDB client owned by this session")
    params: ConnectionParams = Field(..., description="Original connection request")
    connection_string: str = Field(..., description="Resolved URI used to connect")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Session creation timestamp",
    )

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @property
    def database(self) -> str:
        """
        Database named in the original request.

        Falls back to the path of the connection string, then to the
        driver's default database name.
        """
        if self.params.database:
            return self.params.database
        path = urlsplit(self.connection_string).path.lstrip("/")
        return unquote(path) or DEFAULT_DATABASE
