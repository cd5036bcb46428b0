"""WebSocket message loop for /transcription-stream."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from scribe.state.runtime import RuntimeDeps
from scribe.errors import ProtocolError, MissingHeaderError
from scribe.streaming.session import RecordingSession
from scribe.config.websocket import WS_KEY_TYPE, MSG_AUDIO_ERROR, WS_ERROR_INVALID_PAYLOAD

from .errors import send_error
from .dispatch import HANDLERS
from .parser import parse_client_message
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


async def _recv_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[str | bytes | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=lifecycle.watchdog_tick_s * 2)
    except TimeoutError:
        return None, lifecycle.should_close()

    if message.get("type") == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code") or 1000)

    # Binary frames carry the same JSON envelope as text frames.
    text = message.get("text")
    if text is not None:
        return text, False
    return message.get("bytes") or b"", False


async def _parse_or_send_error(ws: WebSocket, raw: str | bytes, session: RecordingSession) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw)
    except ProtocolError as exc:
        logger.warning("malformed message connection_id=%s: %s", session.connection_id, exc)
        await send_error(ws, message=exc.message, code=exc.code)
        return None


async def run_message_loop(
    ws: WebSocket,
    lifecycle: WebSocketLifecycle,
    session: RecordingSession,
    runtime_deps: RuntimeDeps,
) -> None:
    try:
        while True:
            raw, should_exit = await _recv_with_watchdog(ws, lifecycle)
            if should_exit:
                return
            if raw is None:
                continue

            lifecycle.touch()

            msg = await _parse_or_send_error(ws, raw, session)
            if msg is None:
                continue

            msg_type = msg[WS_KEY_TYPE]
            logger.debug("received %s connection_id=%s", msg_type, session.connection_id)

            handler = HANDLERS.get(msg_type)
            if handler is None:
                logger.info("ignoring unknown message type=%r connection_id=%s", msg_type, session.connection_id)
                continue

            try:
                await handler(ws, runtime_deps, session, msg)
            except MissingHeaderError:
                logger.exception("no header chunk for decodable unit connection_id=%s", session.connection_id)
                await send_error(ws, message=MSG_AUDIO_ERROR, code=WS_ERROR_INVALID_PAYLOAD)
    except WebSocketDisconnect:
        return


__all__ = ["run_message_loop"]
