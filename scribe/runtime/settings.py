"""Environment parsing for runtime settings.

Env names and defaults live in `scribe/config/*`; this module resolves them
into the structured dataclasses used by the rest of the server.
"""

from __future__ import annotations

import os
import logging

from scribe.state.settings import (
    AppSettings,
    LimitsSettings,
    OpenAISettings,
    WebSocketSettings,
    TranscriptionSettings,
)
from scribe.config.secrets import (
    ENV_OPENAI_API_KEY,
    ENV_OPENAI_BASE_URL,
    ENV_OPENAI_TIMEOUT_S,
    ENV_OPENAI_MAX_RETRIES,
    DEFAULT_OPENAI_TIMEOUT_S,
    DEFAULT_OPENAI_MAX_RETRIES,
)
from scribe.config.limits import (
    ENV_MAX_AUDIO_CHUNK_BYTES,
    DEFAULT_MAX_AUDIO_CHUNK_BYTES,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)
from scribe.config.websocket import (
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
    ENV_WS_MAX_CONNECTION_DURATION_S,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)
from scribe.config.transcription import (
    ENV_TRANSCRIPTION_MODEL,
    ENV_TRANSCRIPTION_LANGUAGE,
    DEFAULT_TRANSCRIPTION_MODEL,
    ENV_TRANSCRIPTION_TEMPERATURE,
    ENV_TRANSCRIPTION_WINDOW_CHUNKS,
    DEFAULT_TRANSCRIPTION_LANGUAGE,
    DEFAULT_TRANSCRIPTION_TEMPERATURE,
    DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS,
)

logger = logging.getLogger(__name__)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s", name, raw, default)
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s", name, raw, default)
        return default


def _load_limits_settings() -> LimitsSettings:
    return LimitsSettings(
        max_concurrent_connections=max(
            1, _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
        ),
        max_audio_chunk_bytes=max(0, _int_env(ENV_MAX_AUDIO_CHUNK_BYTES, DEFAULT_MAX_AUDIO_CHUNK_BYTES)),
    )


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        idle_timeout_s=_float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S),
        watchdog_tick_s=_float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S),
        max_connection_duration_s=_float_env(ENV_WS_MAX_CONNECTION_DURATION_S, DEFAULT_WS_MAX_CONNECTION_DURATION_S),
    )


def _load_transcription_settings() -> TranscriptionSettings:
    return TranscriptionSettings(
        model=_str_env(ENV_TRANSCRIPTION_MODEL, DEFAULT_TRANSCRIPTION_MODEL),
        language=_str_env(ENV_TRANSCRIPTION_LANGUAGE, DEFAULT_TRANSCRIPTION_LANGUAGE),
        temperature=_float_env(ENV_TRANSCRIPTION_TEMPERATURE, DEFAULT_TRANSCRIPTION_TEMPERATURE),
        window_chunks=max(1, _int_env(ENV_TRANSCRIPTION_WINDOW_CHUNKS, DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS)),
    )


def _load_openai_settings() -> OpenAISettings:
    base_url = (os.getenv(ENV_OPENAI_BASE_URL) or "").strip() or None
    return OpenAISettings(
        api_key=(os.getenv(ENV_OPENAI_API_KEY) or "").strip(),
        base_url=base_url,
        timeout_s=_float_env(ENV_OPENAI_TIMEOUT_S, DEFAULT_OPENAI_TIMEOUT_S),
        max_retries=max(0, _int_env(ENV_OPENAI_MAX_RETRIES, DEFAULT_OPENAI_MAX_RETRIES)),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        transcription=_load_transcription_settings(),
        openai=_load_openai_settings(),
    )


__all__ = ["load_settings"]
