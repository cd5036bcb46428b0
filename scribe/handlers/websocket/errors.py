"""Send helpers for server -> client frames."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from scribe.streaming.events import build_error_event

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def send_event(ws: WebSocket, event: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(event).decode("utf-8"))


async def send_error(ws: WebSocket, *, message: str, code: str) -> bool:
    return await send_event(ws, build_error_event(message, code=code))


async def reject_connection(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    close_code: int,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await send_error(ws, message=message, code=error_code)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "reject_connection",
    "safe_send_text",
    "send_error",
    "send_event",
]
