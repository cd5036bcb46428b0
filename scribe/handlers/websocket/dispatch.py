"""Dispatch handlers for client JSON messages."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from fastapi import WebSocket

from scribe.errors import ProtocolError
from scribe.state.runtime import RuntimeDeps
from scribe.streaming.session import RecordingSession
from scribe.config.websocket import WS_MSG_AUDIO_CHUNK, WS_MSG_STOP_RECORDING, WS_MSG_START_RECORDING

from .errors import send_error
from .parser import decode_audio_chunk, read_consultation_id

logger = logging.getLogger(__name__)

HandlerFn = Callable[[WebSocket, RuntimeDeps, RecordingSession, dict[str, Any]], Awaitable[None]]


async def _handle_start(
    ws: WebSocket,
    _runtime_deps: RuntimeDeps,
    session: RecordingSession,
    msg: dict[str, Any],
) -> None:
    try:
        consultation_id = read_consultation_id(msg)
    except ProtocolError as exc:
        await send_error(ws, message=exc.message, code=exc.code)
        return
    if consultation_id is None:
        logger.warning("start_recording without consultationId connection_id=%s", session.connection_id)
    await session.start(consultation_id)


async def _handle_chunk(
    ws: WebSocket,
    runtime_deps: RuntimeDeps,
    session: RecordingSession,
    msg: dict[str, Any],
) -> None:
    if not session.state.is_recording:
        logger.info("ignoring audio_chunk while idle connection_id=%s", session.connection_id)
        return
    try:
        data = decode_audio_chunk(msg, max_bytes=runtime_deps.settings.limits.max_audio_chunk_bytes)
    except ProtocolError as exc:
        logger.warning("dropping audio chunk connection_id=%s: %s", session.connection_id, exc.__cause__ or exc)
        await send_error(ws, message=exc.message, code=exc.code)
        return
    await session.submit_chunk(data)


async def _handle_stop(
    _ws: WebSocket,
    _runtime_deps: RuntimeDeps,
    session: RecordingSession,
    _msg: dict[str, Any],
) -> None:
    await session.stop()


HANDLERS: dict[str, HandlerFn] = {
    WS_MSG_START_RECORDING: _handle_start,
    WS_MSG_AUDIO_CHUNK: _handle_chunk,
    WS_MSG_STOP_RECORDING: _handle_stop,
}

__all__ = ["HANDLERS", "HandlerFn"]
