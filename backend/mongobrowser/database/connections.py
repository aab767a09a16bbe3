"""
Driver-level connection handling: URI composition and client creation.
"""
import logging
from typing import Any, Callable
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient

from mongobrowser.config import Settings
from mongobrowser.core.errors import ConnectFailure
from mongobrowser.models.session import ConnectionParams

logger = logging.getLogger(__name__)

# Called as factory(uri, connectTimeoutMS=..., serverSelectionTimeoutMS=...)
ClientFactory = Callable[..., Any]


def build_connection_uri(params: ConnectionParams, settings: Settings) -> str:
    """
    Build the connection target for a request.

    A raw connection string is used verbatim. Otherwise the URI is composed as
    ``scheme://[user:pass@]host:port/database``; credentials are only added
    when both user and password are present.
    """
    if params.connection_string:
        return params.connection_string

    if not params.host:
        raise ConnectFailure("Either connectionString or host is required")

    auth_part = ""
    if params.user and params.password:
        auth_part = f"{quote_plus(params.user)}:{quote_plus(params.password)}@"

    port = params.port or settings.default_port
    database = params.database or ""
    return f"{settings.uri_scheme}://{auth_part}{params.host}:{port}/{database}"


async def open_client(
    uri: str,
    settings: Settings,
    factory: ClientFactory = AsyncIOMotorClient,
) -> Any:
    """
    Create a client and force a round trip to the server.

    The client is closed before the error propagates when the server cannot
    be reached in time or rejects the credentials.
    """
    client = None
    try:
        client = factory(
            uri,
            connectTimeoutMS=settings.connect_timeout_ms,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        )
        await client.admin.command("ping")
    except Exception as e:
        if client is not None:
            client.close()
        raise ConnectFailure(str(e)) from e
    return client
