"""Runtime dependency construction (speech-to-text client + connection registry)."""

from __future__ import annotations

import logging

from scribe.state import RuntimeDeps
from scribe.state.settings import AppSettings
from scribe.transcription.base import Transcriber
from scribe.transcription.whisper import WhisperTranscriber
from scribe.handlers.connections import ConnectionRegistry
from scribe.streaming.invoker import TranscriptionInvoker
from scribe.streaming.session import EventSink, RecordingSession

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_registry(settings: AppSettings, transcriber: Transcriber) -> ConnectionRegistry:
    invoker = TranscriptionInvoker(
        transcriber,
        language=settings.transcription.language,
        temperature=settings.transcription.temperature,
    )
    window_chunks = settings.transcription.window_chunks

    def _new_session(connection_id: str, sink: EventSink) -> RecordingSession:
        return RecordingSession(connection_id, sink=sink, invoker=invoker, window_chunks=window_chunks)

    return ConnectionRegistry(
        max_connections=settings.limits.max_concurrent_connections,
        session_factory=_new_session,
    )


def build_runtime_deps_from(settings: AppSettings, transcriber: Transcriber) -> RuntimeDeps:
    return RuntimeDeps(
        connections=build_registry(settings, transcriber),
        transcriber=transcriber,
        settings=settings,
    )


async def build_runtime_deps() -> RuntimeDeps:
    settings = load_settings()
    if not settings.openai.api_key:
        # Misconfiguration: every transcription call will fail and be reported to clients.
        logger.warning("OPENAI_API_KEY is not set; transcription requests will fail")

    transcriber = WhisperTranscriber(settings.openai, model=settings.transcription.model)
    logger.info(
        "transcriber: model=%s language=%s window_chunks=%d",
        settings.transcription.model,
        settings.transcription.language,
        settings.transcription.window_chunks,
    )
    return build_runtime_deps_from(settings, transcriber)


__all__ = ["RuntimeDeps", "build_registry", "build_runtime_deps", "build_runtime_deps_from"]
