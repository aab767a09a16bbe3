"""
Connections router for opening and closing database sessions.
"""
from fastapi import APIRouter, status

from mongobrowser.dependencies.registry import Registry
from mongobrowser.schemas.connection import (
    CloseResponse,
    ConnectRequest,
    ConnectResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/api", tags=["Connections"])


@router.post(
    "/testConnection",
    response_model=ConnectResponse,
    status_code=status.HTTP_200_OK,
    summary="Open connection",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def open_connection(body: ConnectRequest, registry: Registry):
    """
    Connect to a MongoDB server and register the session.

    - **connectionString**: Raw connection URI, used verbatim when given
    - **host** / **port**: Server address (port defaults to 27017)
    - **database**: Database to browse
    - **user** / **password**: Optional credentials, used only together

    The returned `connectionId` addresses the session in later requests.
    """
    connection_id = await registry.open(body)
    return ConnectResponse(connection_id=connection_id)


@router.delete(
    "/connections/{connection_id}",
    response_model=CloseResponse,
    summary="Close connection",
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def close_connection(connection_id: str, registry: Registry):
    """
    Close a session and release its connection.

    Queries still running on the connection are not cancelled and may fail.
    """
    await registry.close(connection_id)
    return CloseResponse()
