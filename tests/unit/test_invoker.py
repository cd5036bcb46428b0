from __future__ import annotations

import pytest

from scribe.streaming.buffer import DecodableUnit
from tests.support import ScriptedTranscriber
from scribe.errors import AudioDecodeError, TranscriptionUnavailableError
from scribe.state.outcome import OutcomeKind
from scribe.streaming.invoker import TranscriptionInvoker

UNIT = DecodableUnit(header=b"H", chunks=(b"a", b"b"))


async def _run(result: object, *, final: bool = False):
    transcriber = ScriptedTranscriber(result)
    invoker = TranscriptionInvoker(transcriber, language="en", temperature=0.2)
    outcome = await invoker.transcribe(UNIT, final=final, connection_id="conn-1")
    return outcome, transcriber


@pytest.mark.asyncio
async def test_text_is_stripped() -> None:
    outcome, transcriber = await _run("  hello there \n")
    assert outcome.kind is OutcomeKind.TEXT
    assert outcome.text == "hello there"
    assert outcome.ok

    call = transcriber.calls[0]
    assert call.audio == b"Hab"
    assert call.language == "en"
    assert call.temperature == 0.2


@pytest.mark.asyncio
async def test_blank_text_is_empty() -> None:
    outcome, _ = await _run("   ")
    assert outcome.kind is OutcomeKind.EMPTY
    assert outcome.text == ""
    assert outcome.ok


@pytest.mark.asyncio
async def test_decode_failure_is_classified() -> None:
    outcome, _ = await _run(AudioDecodeError("Audio file could not be decoded"))
    assert outcome.kind is OutcomeKind.DECODE_FAILED
    assert not outcome.ok
    assert "could not be decoded" in (outcome.reason or "")


@pytest.mark.asyncio
async def test_provider_failure_is_classified() -> None:
    outcome, _ = await _run(TranscriptionUnavailableError("503"))
    assert outcome.kind is OutcomeKind.FAILED


@pytest.mark.asyncio
async def test_unexpected_exception_does_not_escape() -> None:
    outcome, _ = await _run(RuntimeError("boom"))
    assert outcome.kind is OutcomeKind.FAILED
    assert outcome.reason == "boom"


@pytest.mark.asyncio
async def test_upload_names_follow_mode() -> None:
    _, transcriber = await _run("x")
    assert transcriber.calls[0].filename.startswith("temp-conn-1-")
    assert transcriber.calls[0].filename.endswith(".webm")

    _, transcriber = await _run("x", final=True)
    assert transcriber.calls[0].filename.startswith("final-conn-1-")
