"""Configuration module exports (env names and defaults only)."""

from .websocket import WS_ENDPOINT_PATH
from .limits import DEFAULT_MAX_CONCURRENT_CONNECTIONS
from .transcription import DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS",
    "WS_ENDPOINT_PATH",
]
