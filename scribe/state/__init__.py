from .runtime import RuntimeDeps
from .settings import AppSettings
from .session import SessionPhase, SessionState
from .outcome import OutcomeKind, TranscriptOutcome

__all__ = ["AppSettings", "OutcomeKind", "RuntimeDeps", "SessionPhase", "SessionState", "TranscriptOutcome"]
