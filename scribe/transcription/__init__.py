from .base import Transcriber
from .whisper import WhisperTranscriber

__all__ = ["Transcriber", "WhisperTranscriber"]
