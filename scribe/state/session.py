"""Per-connection recording state (dataclasses only)."""

from __future__ import annotations

import enum
from dataclasses import field, dataclass


class SessionPhase(str, enum.Enum):
    IDLE = "idle"
    RECORDING = "recording"


@dataclass(slots=True)
class SessionState:
    """Mutable state owned by exactly one connection.

    ``epoch`` increases on every ``start_recording`` so results of work queued
    for an earlier recording can be recognised and dropped.
    """

    connection_id: str
    consultation_id: str | None = None
    phase: SessionPhase = SessionPhase.IDLE
    transcript_parts: list[str] = field(default_factory=list)
    error_sent: bool = False
    epoch: int = 0

    @property
    def is_recording(self) -> bool:
        return self.phase is SessionPhase.RECORDING

    @property
    def transcript(self) -> str:
        return " ".join(self.transcript_parts)

    def append_transcript(self, text: str) -> str:
        self.transcript_parts.append(text)
        return self.transcript

    def begin_recording(self, consultation_id: str | None) -> None:
        self.epoch += 1
        self.consultation_id = consultation_id
        self.transcript_parts.clear()
        self.error_sent = False
        self.phase = SessionPhase.RECORDING

    def end_recording(self) -> None:
        self.phase = SessionPhase.IDLE


__all__ = ["SessionPhase", "SessionState"]
