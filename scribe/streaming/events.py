"""Builders for server -> client frames."""

from __future__ import annotations

from typing import Any
from datetime import datetime, timezone

from scribe.config.websocket import (
    WS_KEY_TYPE,
    MSG_CONNECTED,
    WS_EVENT_ERROR,
    WS_KEY_MESSAGE,
    WS_KEY_TIMESTAMP,
    WS_EVENT_CONNECTION,
    WS_EVENT_TRANSCRIPT,
    MSG_RECORDING_STARTED,
    MSG_RECORDING_STOPPED,
    WS_EVENT_RECORDING_STARTED,
    WS_EVENT_RECORDING_STOPPED,
)

Event = dict[str, Any]


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_connection_event(connection_id: str) -> Event:
    return {WS_KEY_TYPE: WS_EVENT_CONNECTION, "connectionId": connection_id, WS_KEY_MESSAGE: MSG_CONNECTED}


def build_recording_started_event(consultation_id: str | None) -> Event:
    return {
        WS_KEY_TYPE: WS_EVENT_RECORDING_STARTED,
        "consultationId": consultation_id,
        WS_KEY_MESSAGE: MSG_RECORDING_STARTED,
    }


def build_transcript_event(text: str, *, final: bool) -> Event:
    event: Event = {
        WS_KEY_TYPE: WS_EVENT_TRANSCRIPT,
        "text": text,
        WS_KEY_TIMESTAMP: utc_timestamp(),
        "isPartial": not final,
    }
    if final:
        event["isFinal"] = True
    return event


def build_recording_stopped_event() -> Event:
    return {WS_KEY_TYPE: WS_EVENT_RECORDING_STOPPED, WS_KEY_MESSAGE: MSG_RECORDING_STOPPED}


def build_error_event(message: str, *, code: str) -> Event:
    return {
        WS_KEY_TYPE: WS_EVENT_ERROR,
        WS_KEY_MESSAGE: message,
        WS_KEY_TIMESTAMP: utc_timestamp(),
        "code": code,
    }


__all__ = [
    "Event",
    "build_connection_event",
    "build_error_event",
    "build_recording_started_event",
    "build_recording_stopped_event",
    "build_transcript_event",
    "utc_timestamp",
]
