"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib
from functools import partial

from fastapi import WebSocket

from scribe.state.runtime import RuntimeDeps
from scribe.streaming.session import RecordingSession
from scribe.config.websocket import WS_CLOSE_BUSY_CODE, MSG_SERVER_AT_CAPACITY, WS_ERROR_SERVER_AT_CAPACITY

from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop
from .errors import send_error, send_event, reject_connection

logger = logging.getLogger(__name__)


async def _admit_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> RecordingSession | None:
    registry = runtime_deps.connections
    if registry.is_full():
        await reject_connection(
            ws,
            error_code=WS_ERROR_SERVER_AT_CAPACITY,
            message=MSG_SERVER_AT_CAPACITY,
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return None

    await ws.accept()
    session = await registry.register(partial(send_event, ws))
    if session is None:
        # Lost the race for the last slot while accepting.
        await send_error(ws, message=MSG_SERVER_AT_CAPACITY, code=WS_ERROR_SERVER_AT_CAPACITY)
        with contextlib.suppress(Exception):
            await ws.close(code=WS_CLOSE_BUSY_CODE, reason=MSG_SERVER_AT_CAPACITY)
    return session


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    lifecycle: WebSocketLifecycle | None = None
    session: RecordingSession | None = None
    try:
        session = await _admit_connection(ws, runtime_deps)
        if session is None:
            return

        ws_settings = runtime_deps.settings.websocket
        lifecycle = WebSocketLifecycle(
            ws,
            idle_timeout_s=ws_settings.idle_timeout_s,
            watchdog_tick_s=ws_settings.watchdog_tick_s,
            max_connection_duration_s=ws_settings.max_connection_duration_s,
            is_busy_fn=session.is_busy,
            connection_id=session.connection_id,
        )
        lifecycle.start()

        logger.info(
            "WebSocket connection accepted connection_id=%s. Active: %s",
            session.connection_id,
            runtime_deps.connections.get_connection_count(),
        )
        await run_message_loop(ws, lifecycle, session, runtime_deps)
    finally:
        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        if session is not None:
            await runtime_deps.connections.remove(session.connection_id)
            logger.info(
                "WebSocket connection closed connection_id=%s. Active: %s",
                session.connection_id,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
