"""Abstract base for speech-to-text backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Transcriber(ABC):
    @abstractmethod
    async def transcribe(
        self,
        audio: bytes,
        *,
        filename: str,
        language: str,
        temperature: float,
    ) -> str:
        """Convert one self-contained audio blob to text.

        Raises ``AudioDecodeError`` when the blob cannot be decoded and
        ``TranscriptionUnavailableError`` for any other provider failure.
        """
        ...

    async def aclose(self) -> None:
        return None


__all__ = ["Transcriber"]
