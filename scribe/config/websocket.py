"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/transcription-stream"

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_MESSAGE = "message"
WS_KEY_TIMESTAMP = "timestamp"

# Inbound message types
WS_MSG_START_RECORDING = "start_recording"
WS_MSG_AUDIO_CHUNK = "audio_chunk"
WS_MSG_STOP_RECORDING = "stop_recording"

# Outbound message types
WS_EVENT_CONNECTION = "connection"
WS_EVENT_RECORDING_STARTED = "recording_started"
WS_EVENT_TRANSCRIPT = "transcript"
WS_EVENT_RECORDING_STOPPED = "recording_stopped"
WS_EVENT_ERROR = "error"

# Close codes
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Idle watchdog
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
ENV_WS_MAX_CONNECTION_DURATION_S = "WS_MAX_CONNECTION_DURATION_S"

DEFAULT_WS_IDLE_TIMEOUT_S = 150.0
DEFAULT_WS_WATCHDOG_TICK_S = 5.0
DEFAULT_WS_MAX_CONNECTION_DURATION_S = 4 * 60 * 60.0

# Errors (error.code values)
WS_ERROR_SERVER_AT_CAPACITY = "server_at_capacity"
WS_ERROR_INVALID_MESSAGE = "invalid_message"
WS_ERROR_INVALID_PAYLOAD = "invalid_payload"
WS_ERROR_TRANSCRIPTION_UNAVAILABLE = "transcription_unavailable"
WS_ERROR_FINAL_TRANSCRIPTION_FAILED = "final_transcription_failed"

# Human-readable messages shown by the browser client
MSG_CONNECTED = "Connected to transcription stream"
MSG_RECORDING_STARTED = "Recording started - Speak now!"
MSG_RECORDING_STOPPED = "Recording stopped"
MSG_INVALID_MESSAGE = "Invalid message format"
MSG_AUDIO_ERROR = "Error processing audio"
MSG_TRANSCRIPTION_UNAVAILABLE = "Transcription temporarily unavailable"
MSG_FINAL_TRANSCRIPTION_FAILED = "Final transcription failed"
MSG_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."

__all__ = [
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_MAX_CONNECTION_DURATION_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "ENV_WS_IDLE_TIMEOUT_S",
    "ENV_WS_MAX_CONNECTION_DURATION_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "MSG_AUDIO_ERROR",
    "MSG_CONNECTED",
    "MSG_FINAL_TRANSCRIPTION_FAILED",
    "MSG_INVALID_MESSAGE",
    "MSG_RECORDING_STARTED",
    "MSG_RECORDING_STOPPED",
    "MSG_SERVER_AT_CAPACITY",
    "MSG_TRANSCRIPTION_UNAVAILABLE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_ENDPOINT_PATH",
    "WS_ERROR_FINAL_TRANSCRIPTION_FAILED",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_INVALID_PAYLOAD",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "WS_ERROR_TRANSCRIPTION_UNAVAILABLE",
    "WS_EVENT_CONNECTION",
    "WS_EVENT_ERROR",
    "WS_EVENT_RECORDING_STARTED",
    "WS_EVENT_RECORDING_STOPPED",
    "WS_EVENT_TRANSCRIPT",
    "WS_KEY_MESSAGE",
    "WS_KEY_TIMESTAMP",
    "WS_KEY_TYPE",
    "WS_MSG_AUDIO_CHUNK",
    "WS_MSG_START_RECORDING",
    "WS_MSG_STOP_RECORDING",
]
