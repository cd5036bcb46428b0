from __future__ import annotations

import json
import base64

import pytest

from scribe.errors import ProtocolError
from scribe.handlers.websocket.parser import decode_audio_chunk, parse_client_message, read_consultation_id


def test_parse_client_message_ok() -> None:
    raw = json.dumps({"type": " start_recording ", "consultationId": "c-1"})
    msg = parse_client_message(raw)
    assert msg["type"] == "start_recording"
    assert msg["consultationId"] == "c-1"


def test_parse_client_message_accepts_bytes() -> None:
    msg = parse_client_message(b'{"type": "stop_recording"}')
    assert msg["type"] == "stop_recording"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        json.dumps([]),
        json.dumps("start_recording"),
        json.dumps({"consultationId": "c"}),
        json.dumps({"type": ""}),
        json.dumps({"type": 3}),
        b"\xff\xfe",
    ],
)
def test_parse_client_message_invalid(raw: str | bytes) -> None:
    with pytest.raises(ProtocolError) as exc_info:
        parse_client_message(raw)
    assert exc_info.value.code == "invalid_message"


@pytest.mark.parametrize(
    ("msg", "expected"),
    [
        ({"consultationId": "c-1"}, "c-1"),
        ({"consultation_id": "c-2"}, "c-2"),
        ({"consultationId": 42}, "42"),
        ({"consultationId": "   "}, None),
        ({}, None),
    ],
)
def test_read_consultation_id(msg: dict, expected: str | None) -> None:
    assert read_consultation_id(msg) == expected


@pytest.mark.parametrize("value", [["c"], {"id": 1}, True])
def test_read_consultation_id_rejects_non_scalar(value: object) -> None:
    with pytest.raises(ProtocolError) as exc_info:
        read_consultation_id({"consultationId": value})
    assert exc_info.value.code == "invalid_payload"


def test_decode_audio_chunk_ok() -> None:
    encoded = base64.b64encode(b"\x1aE\xdf\xa3webm").decode()
    assert decode_audio_chunk({"audioData": encoded}, max_bytes=1024) == b"\x1aE\xdf\xa3webm"
    assert decode_audio_chunk({"audio_data": encoded}, max_bytes=1024) == b"\x1aE\xdf\xa3webm"


def test_decode_audio_chunk_strips_data_url() -> None:
    encoded = "data:audio/webm;codecs=opus;base64," + base64.b64encode(b"opus").decode()
    assert decode_audio_chunk({"audioData": encoded}, max_bytes=0) == b"opus"


@pytest.mark.parametrize(
    "msg",
    [
        {},
        {"audioData": ""},
        {"audioData": 123},
        {"audioData": "%%% not base64 %%%"},
    ],
)
def test_decode_audio_chunk_invalid(msg: dict) -> None:
    with pytest.raises(ProtocolError) as exc_info:
        decode_audio_chunk(msg, max_bytes=1024)
    assert exc_info.value.code == "invalid_payload"
    assert exc_info.value.message == "Error processing audio"


def test_decode_audio_chunk_enforces_size_limit() -> None:
    encoded = base64.b64encode(b"x" * 64).decode()
    with pytest.raises(ProtocolError):
        decode_audio_chunk({"audioData": encoded}, max_bytes=32)
    assert len(decode_audio_chunk({"audioData": encoded}, max_bytes=64)) == 64
