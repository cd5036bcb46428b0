"""Admission control and payload limits (env names and defaults only)."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_MAX_AUDIO_CHUNK_BYTES = "MAX_AUDIO_CHUNK_BYTES"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100

# MediaRecorder timeslices are a few hundred KB at most; anything bigger is a client bug.
DEFAULT_MAX_AUDIO_CHUNK_BYTES = 2 * 1024 * 1024

__all__ = [
    "DEFAULT_MAX_AUDIO_CHUNK_BYTES",
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "ENV_MAX_AUDIO_CHUNK_BYTES",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
]
