"""Client message parsing/validation."""

from __future__ import annotations

import json
import base64
import binascii
from typing import Any

from scribe.errors import ProtocolError
from scribe.config.websocket import (
    WS_KEY_TYPE,
    MSG_AUDIO_ERROR,
    MSG_INVALID_MESSAGE,
    WS_ERROR_INVALID_MESSAGE,
    WS_ERROR_INVALID_PAYLOAD,
)

# Browser clients send camelCase; snake_case is accepted for non-browser clients.
_CONSULTATION_ID_KEYS = ("consultationId", "consultation_id")
_AUDIO_DATA_KEYS = ("audioData", "audio_data")


def _first_present(msg: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in msg:
            return msg[key]
    return None


def _estimate_b64_decoded_bytes(s: str) -> int:
    """Estimate decoded byte length of a base64 string without decoding it."""
    padding = 0
    if s.endswith("=="):
        padding = 2
    elif s.endswith("="):
        padding = 1

    # base64 expands 3 bytes -> 4 chars
    return max(0, (len(s) * 3) // 4 - padding)


def parse_client_message(raw: str | bytes) -> dict[str, Any]:
    try:
        msg = json.loads(raw)
    except (ValueError, TypeError) as exc:
        raise ProtocolError(WS_ERROR_INVALID_MESSAGE, f"{MSG_INVALID_MESSAGE}: {exc}") from exc

    if not isinstance(msg, dict):
        raise ProtocolError(WS_ERROR_INVALID_MESSAGE, f"{MSG_INVALID_MESSAGE}: expected a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ProtocolError(WS_ERROR_INVALID_MESSAGE, f"{MSG_INVALID_MESSAGE}: missing non-empty 'type'")

    msg[WS_KEY_TYPE] = msg_type.strip()
    return msg


def read_consultation_id(msg: dict[str, Any]) -> str | None:
    value = _first_present(msg, _CONSULTATION_ID_KEYS)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ProtocolError(WS_ERROR_INVALID_PAYLOAD, "consultationId must be a string")
    return value.strip() or None


def decode_audio_chunk(msg: dict[str, Any], *, max_bytes: int) -> bytes:
    value = _first_present(msg, _AUDIO_DATA_KEYS)
    if not isinstance(value, str) or not value.strip():
        raise ProtocolError(WS_ERROR_INVALID_PAYLOAD, MSG_AUDIO_ERROR)

    encoded = value.strip()
    # Tolerate a data URL straight from FileReader.readAsDataURL().
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]

    if max_bytes > 0 and _estimate_b64_decoded_bytes(encoded) > max_bytes:
        raise ProtocolError(WS_ERROR_INVALID_PAYLOAD, MSG_AUDIO_ERROR)

    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ProtocolError(WS_ERROR_INVALID_PAYLOAD, MSG_AUDIO_ERROR) from exc
    if not data:
        raise ProtocolError(WS_ERROR_INVALID_PAYLOAD, MSG_AUDIO_ERROR)
    return data


__all__ = ["decode_audio_chunk", "parse_client_message", "read_consultation_id"]
