"""Shared error types for the transcription stream server."""

from __future__ import annotations


class TranscriptionError(Exception):
    """Raised by a transcriber when a decodable unit could not be transcribed."""


class AudioDecodeError(TranscriptionError):
    """The provider could not decode the unit (too short or structurally invalid)."""


class TranscriptionUnavailableError(TranscriptionError):
    """Transient or unknown provider failure."""


class MissingHeaderError(RuntimeError):
    """A decodable unit was requested before the session stored its header chunk."""

    def __init__(self, chunk_count: int) -> None:
        self.chunk_count = chunk_count
        super().__init__(f"cannot build a decodable unit from {chunk_count} chunk(s) without a header chunk")


class ProtocolError(ValueError):
    """Client message could not be parsed or carries an invalid payload."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


__all__ = [
    "AudioDecodeError",
    "MissingHeaderError",
    "ProtocolError",
    "TranscriptionError",
    "TranscriptionUnavailableError",
]
