from __future__ import annotations

import itertools

import pytest

from scribe.streaming.session import RecordingSession
from scribe.handlers.connections import ConnectionRegistry
from scribe.streaming.invoker import TranscriptionInvoker
from tests.support import EventRecorder, ScriptedTranscriber


def _registry(max_connections: int = 10, id_factory=None) -> ConnectionRegistry:
    invoker = TranscriptionInvoker(ScriptedTranscriber(echo=True))

    def factory(connection_id: str, sink) -> RecordingSession:
        return RecordingSession(connection_id, sink=sink, invoker=invoker, window_chunks=8)

    return ConnectionRegistry(max_connections=max_connections, session_factory=factory, id_factory=id_factory)


@pytest.mark.asyncio
async def test_register_announces_connection_id() -> None:
    registry = _registry()
    recorder = EventRecorder()

    session = await registry.register(recorder)

    assert session is not None
    assert session.connection_id.startswith("conn-")
    assert recorder.events[0]["type"] == "connection"
    assert recorder.events[0]["connectionId"] == session.connection_id
    assert registry.lookup(session.connection_id) is session
    assert not session.state.is_recording
    assert registry.get_connection_count() == 1


@pytest.mark.asyncio
async def test_register_refuses_when_full() -> None:
    registry = _registry(max_connections=1)
    assert await registry.register(EventRecorder()) is not None
    assert registry.is_full()

    recorder = EventRecorder()
    assert await registry.register(recorder) is None
    assert recorder.events == []
    assert registry.get_connection_count() == 1


@pytest.mark.asyncio
async def test_ids_are_unique_even_when_factory_repeats() -> None:
    ids = itertools.chain(["dup", "dup"], (f"id-{i}" for i in itertools.count()))
    registry = _registry(id_factory=lambda: next(ids))

    first = await registry.register(EventRecorder())
    second = await registry.register(EventRecorder())

    assert first is not None and second is not None
    assert first.connection_id == "dup"
    assert second.connection_id == "id-0"


@pytest.mark.asyncio
async def test_remove_closes_session_and_is_idempotent() -> None:
    registry = _registry()
    session = await registry.register(EventRecorder())
    assert session is not None

    await registry.remove(session.connection_id)
    await registry.remove(session.connection_id)

    assert session.is_closed
    assert registry.lookup(session.connection_id) is None
    assert registry.get_connection_count() == 0


@pytest.mark.asyncio
async def test_close_all_closes_every_session() -> None:
    registry = _registry()
    sessions = [await registry.register(EventRecorder()) for _ in range(3)]

    await registry.close_all()

    assert all(s is not None and s.is_closed for s in sessions)
    assert registry.get_connection_count() == 0
