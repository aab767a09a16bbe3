"""
Session registry.

Owns every open connection of the process: creation, lookup and disposal.
One registry is created per application and injected into request handlers.
"""
import logging
import threading
import uuid
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from mongobrowser.config import Settings, get_settings
from mongobrowser.core.errors import CloseFailure, ConnectFailure, SessionNotFound
from mongobrowser.database.connections import (
    ClientFactory,
    build_connection_uri,
    open_client,
)
from mongobrowser.models.session import ConnectionParams, Session

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Synchronized mapping from session id to Session.

    A session is present if and only if its handle is open. The lock is
    never held across an await, so lookups stay cheap and the registry can
    be shared by the event loop and worker threads alike.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = AsyncIOMotorClient,
    ):
        self.settings = settings or get_settings()
        self.client_factory = client_factory
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    async def open(self, params: ConnectionParams) -> str:
        """
        Open a connection and register it.

        Returns:
            The new session id

        Raises:
            ConnectFailure: If the target is malformed or unreachable, or
                authentication fails. No handle is left open.
        """
        uri = build_connection_uri(params, self.settings)
        try:
            client = await open_client(uri, self.settings, self.client_factory)
        except ConnectFailure as e:
            logger.warning(
                f"Connection to host={params.host or '<uri>'} "
                f"database={params.database} failed: {e.error}"
            )
            raise

        session = Session(
            id=uuid.uuid4().hex,
            handle=client,
            params=params,
            connection_string=uri,
        )
        with self._lock:
            self._sessions[session.id] = session

        logger.info(f"Opened session {session.id} (database={session.database})")
        return session.id

    def get(self, session_id: str) -> Optional[Session]:
        """Look up a session without side effects."""
        with self._lock:
            return self._sessions.get(session_id)

    def require(self, session_id: str) -> Session:
        """Look up a session, raising SessionNotFound when absent."""
        session = self.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    async def close(self, session_id: str) -> None:
        """
        Close a session's handle and remove it.

        The entry is removed before the handle is closed, so a concurrent
        close of the same id reports SessionNotFound. Queries in flight on
        the handle are not cancelled and may fail with a closed-client error.

        Raises:
            SessionNotFound: If no session has this id
            CloseFailure: If the driver raises while closing
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFound(session_id)

        try:
            session.handle.close()
        except Exception as e:
            logger.error(f"Closing session {session_id} failed: {e}")
            raise CloseFailure(str(e)) from e

        logger.info(f"Closed session {session_id}")

    async def close_all(self) -> int:
        """
        Close every registered session.

        Used on shutdown; individual close failures are logged and do not
        stop the remaining sessions from closing.

        Returns:
            Number of sessions closed cleanly
        """
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()

        closed = 0
        for session in sessions:
            try:
                session.handle.close()
                closed += 1
            except Exception as e:
                logger.error(f"Closing session {session.id} on shutdown failed: {e}")
        return closed
