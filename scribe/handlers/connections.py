"""Connection registry: admission control and per-connection session ownership."""

from __future__ import annotations

import uuid
import asyncio
import logging
from collections.abc import Callable

from scribe.streaming.session import EventSink, RecordingSession

logger = logging.getLogger(__name__)

SessionFactory = Callable[[str, EventSink], RecordingSession]


def generate_connection_id() -> str:
    return f"conn-{uuid.uuid4().hex}"


class ConnectionRegistry:
    """The only place sessions are created or removed."""

    def __init__(
        self,
        *,
        max_connections: int,
        session_factory: SessionFactory,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._max = max(1, int(max_connections))
        self._session_factory = session_factory
        self._id_factory = id_factory or generate_connection_id
        self._lock = asyncio.Lock()
        self._sessions: dict[str, RecordingSession] = {}

    @property
    def max_connections(self) -> int:
        return self._max

    def is_full(self) -> bool:
        return len(self._sessions) >= self._max

    async def register(self, sink: EventSink) -> RecordingSession | None:
        """Create a session for a new connection and announce its id to the client.

        Returns None without creating anything when the registry is full.
        """
        async with self._lock:
            if len(self._sessions) >= self._max:
                return None
            connection_id = self._id_factory()
            while connection_id in self._sessions:
                connection_id = self._id_factory()
            session = self._session_factory(connection_id, sink)
            self._sessions[connection_id] = session
        await session.announce()
        return session

    def lookup(self, connection_id: str) -> RecordingSession | None:
        return self._sessions.get(connection_id)

    async def remove(self, connection_id: str) -> None:
        async with self._lock:
            session = self._sessions.pop(connection_id, None)
        if session is not None:
            await session.close()

    async def close_all(self) -> None:
        async with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            await session.close()
        if sessions:
            logger.info("closed %d live session(s)", len(sessions))

    def get_connection_count(self) -> int:
        return len(self._sessions)


__all__ = ["ConnectionRegistry", "SessionFactory", "generate_connection_id"]
