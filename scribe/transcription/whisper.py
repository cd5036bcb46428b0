"""OpenAI Whisper speech-to-text backend."""

from __future__ import annotations

import logging

import openai
from openai import AsyncOpenAI

from scribe.state.settings import OpenAISettings
from scribe.errors import AudioDecodeError, TranscriptionUnavailableError
from scribe.config.transcription import AUDIO_MIME_TYPE, DECODE_FAILURE_MARKERS

from .base import Transcriber

logger = logging.getLogger(__name__)


def is_decode_failure(message: str) -> bool:
    return any(marker in message for marker in DECODE_FAILURE_MARKERS)


class WhisperTranscriber(Transcriber):
    def __init__(self, settings: OpenAISettings, *, model: str) -> None:
        self._model = model
        self._client = AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_s,
            max_retries=settings.max_retries,
        )

    async def transcribe(
        self,
        audio: bytes,
        *,
        filename: str,
        language: str,
        temperature: float,
    ) -> str:
        logger.debug("whisper request file=%s bytes=%d model=%s", filename, len(audio), self._model)
        try:
            response = await self._client.audio.transcriptions.create(
                model=self._model,
                file=(filename, audio, AUDIO_MIME_TYPE),
                language=language,
                response_format="text",
                temperature=temperature,
            )
        except openai.BadRequestError as exc:
            if is_decode_failure(str(exc)):
                raise AudioDecodeError(str(exc)) from exc
            raise TranscriptionUnavailableError(str(exc)) from exc
        except openai.OpenAIError as exc:
            raise TranscriptionUnavailableError(str(exc)) from exc

        # response_format="text" yields a bare string; older SDKs wrap it.
        text = response if isinstance(response, str) else getattr(response, "text", "")
        return text or ""

    async def aclose(self) -> None:
        await self._client.close()


__all__ = ["WhisperTranscriber", "is_decode_failure"]
