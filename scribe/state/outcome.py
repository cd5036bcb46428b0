"""Classified result of one transcription call (dataclasses only)."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OutcomeKind(str, enum.Enum):
    TEXT = "text"
    EMPTY = "empty"
    DECODE_FAILED = "decode_failed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class TranscriptOutcome:
    kind: OutcomeKind
    text: str = ""
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind in {OutcomeKind.TEXT, OutcomeKind.EMPTY}


__all__ = ["OutcomeKind", "TranscriptOutcome"]
