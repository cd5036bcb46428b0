from .fakes import EventRecorder, FakeWebSocket, ScriptedTranscriber, make_settings

__all__ = ["EventRecorder", "FakeWebSocket", "ScriptedTranscriber", "make_settings"]
