"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    max_audio_chunk_bytes: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float


@dataclass(frozen=True, slots=True)
class TranscriptionSettings:
    model: str
    language: str
    temperature: float
    window_chunks: int


@dataclass(frozen=True, slots=True)
class OpenAISettings:
    api_key: str
    base_url: str | None
    timeout_s: float
    max_retries: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    limits: LimitsSettings
    websocket: WebSocketSettings
    transcription: TranscriptionSettings
    openai: OpenAISettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "OpenAISettings",
    "TranscriptionSettings",
    "WebSocketSettings",
]
