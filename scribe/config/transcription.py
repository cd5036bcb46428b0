"""Speech-to-text configuration (env names and defaults only)."""

from __future__ import annotations

ENV_TRANSCRIPTION_MODEL = "TRANSCRIPTION_MODEL"
ENV_TRANSCRIPTION_LANGUAGE = "TRANSCRIPTION_LANGUAGE"
ENV_TRANSCRIPTION_TEMPERATURE = "TRANSCRIPTION_TEMPERATURE"
ENV_TRANSCRIPTION_WINDOW_CHUNKS = "TRANSCRIPTION_WINDOW_CHUNKS"

DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_TRANSCRIPTION_LANGUAGE = "en"
# Low temperature keeps Whisper close to greedy decoding.
DEFAULT_TRANSCRIPTION_TEMPERATURE = 0.2
# Browser MediaRecorder emits ~500ms slices, so 8 chunks is roughly 4s of audio.
DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS = 8

# Browser clients record WebM/Opus; the first slice carries the EBML header.
AUDIO_MIME_TYPE = "audio/webm;codecs=opus"
AUDIO_FILE_EXTENSION = "webm"
PARTIAL_FILENAME_PREFIX = "temp"
FINAL_FILENAME_PREFIX = "final"

# Provider messages that mean "this blob is not decodable", not "the service is down".
DECODE_FAILURE_MARKERS: tuple[str, ...] = (
    "could not be decoded",
    "Invalid file format",
)

__all__ = [
    "AUDIO_FILE_EXTENSION",
    "AUDIO_MIME_TYPE",
    "DECODE_FAILURE_MARKERS",
    "DEFAULT_TRANSCRIPTION_LANGUAGE",
    "DEFAULT_TRANSCRIPTION_MODEL",
    "DEFAULT_TRANSCRIPTION_TEMPERATURE",
    "DEFAULT_TRANSCRIPTION_WINDOW_CHUNKS",
    "ENV_TRANSCRIPTION_LANGUAGE",
    "ENV_TRANSCRIPTION_MODEL",
    "ENV_TRANSCRIPTION_TEMPERATURE",
    "ENV_TRANSCRIPTION_WINDOW_CHUNKS",
    "FINAL_FILENAME_PREFIX",
    "PARTIAL_FILENAME_PREFIX",
]
