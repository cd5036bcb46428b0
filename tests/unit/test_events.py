from __future__ import annotations

import re

from scribe.streaming.events import (
    utc_timestamp,
    build_error_event,
    build_connection_event,
    build_transcript_event,
    build_recording_started_event,
)

_ISO_MS_Z = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_timestamp_is_utc_millisecond_iso() -> None:
    assert _ISO_MS_Z.match(utc_timestamp())


def test_partial_transcript_has_no_final_flag() -> None:
    event = build_transcript_event("hello", final=False)
    assert event["type"] == "transcript"
    assert event["isPartial"] is True
    assert "isFinal" not in event
    assert _ISO_MS_Z.match(event["timestamp"])


def test_final_transcript_flags() -> None:
    event = build_transcript_event("done", final=True)
    assert event["isPartial"] is False
    assert event["isFinal"] is True


def test_connection_and_started_events_use_camel_case() -> None:
    assert build_connection_event("conn-1")["connectionId"] == "conn-1"
    started = build_recording_started_event("c-42")
    assert started["type"] == "recording_started"
    assert started["consultationId"] == "c-42"
    assert started["message"] == "Recording started - Speak now!"


def test_error_event_carries_code_and_timestamp() -> None:
    event = build_error_event("Final transcription failed", code="final_transcription_failed")
    assert event["type"] == "error"
    assert event["code"] == "final_transcription_failed"
    assert _ISO_MS_Z.match(event["timestamp"])
