from .buffer import ChunkBuffer, DecodableUnit
from .invoker import TranscriptionInvoker
from .session import EventSink, RecordingSession

__all__ = [
    "ChunkBuffer",
    "DecodableUnit",
    "EventSink",
    "RecordingSession",
    "TranscriptionInvoker",
]
