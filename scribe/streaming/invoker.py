"""Run a decodable unit through the transcriber and classify the result."""

from __future__ import annotations

import time
import logging

from scribe.transcription.base import Transcriber
from scribe.state.outcome import OutcomeKind, TranscriptOutcome
from scribe.errors import AudioDecodeError, TranscriptionError
from scribe.config.transcription import (
    AUDIO_FILE_EXTENSION,
    FINAL_FILENAME_PREFIX,
    PARTIAL_FILENAME_PREFIX,
    DEFAULT_TRANSCRIPTION_LANGUAGE,
    DEFAULT_TRANSCRIPTION_TEMPERATURE,
)

from .buffer import DecodableUnit

logger = logging.getLogger(__name__)


class TranscriptionInvoker:
    def __init__(
        self,
        transcriber: Transcriber,
        *,
        language: str = DEFAULT_TRANSCRIPTION_LANGUAGE,
        temperature: float = DEFAULT_TRANSCRIPTION_TEMPERATURE,
    ) -> None:
        self._transcriber = transcriber
        self.language = language
        self.temperature = temperature

    @staticmethod
    def build_filename(connection_id: str, *, final: bool) -> str:
        prefix = FINAL_FILENAME_PREFIX if final else PARTIAL_FILENAME_PREFIX
        return f"{prefix}-{connection_id}-{int(time.time() * 1000)}.{AUDIO_FILE_EXTENSION}"

    async def transcribe(
        self,
        unit: DecodableUnit,
        *,
        final: bool,
        connection_id: str,
    ) -> TranscriptOutcome:
        mode = "final" if final else "partial"
        filename = self.build_filename(connection_id, final=final)
        logger.info(
            "transcribing %s unit connection_id=%s bytes=%d chunks=%d+header",
            mode,
            connection_id,
            len(unit),
            unit.chunk_count,
        )
        try:
            raw = await self._transcriber.transcribe(
                unit.payload,
                filename=filename,
                language=self.language,
                temperature=self.temperature,
            )
        except AudioDecodeError as exc:
            logger.info("%s unit not decodable connection_id=%s: %s", mode, connection_id, exc)
            return TranscriptOutcome(kind=OutcomeKind.DECODE_FAILED, reason=str(exc))
        except TranscriptionError as exc:
            logger.warning("%s transcription failed connection_id=%s: %s", mode, connection_id, exc)
            return TranscriptOutcome(kind=OutcomeKind.FAILED, reason=str(exc))
        except Exception as exc:
            logger.exception("%s transcription crashed connection_id=%s", mode, connection_id)
            return TranscriptOutcome(kind=OutcomeKind.FAILED, reason=str(exc) or type(exc).__name__)

        text = (raw or "").strip()
        if not text:
            logger.info("empty %s transcription connection_id=%s", mode, connection_id)
            return TranscriptOutcome(kind=OutcomeKind.EMPTY)
        logger.debug("%s transcription connection_id=%s text=%r", mode, connection_id, text[:100])
        return TranscriptOutcome(kind=OutcomeKind.TEXT, text=text)


__all__ = ["TranscriptionInvoker"]
