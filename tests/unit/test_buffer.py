from __future__ import annotations

import pytest

from scribe.errors import MissingHeaderError
from scribe.streaming.buffer import ChunkBuffer


def _chunks(n: int) -> list[bytes]:
    return [f"c{i}".encode() for i in range(1, n + 1)]


def test_first_chunk_becomes_header_and_is_not_windowed() -> None:
    buf = ChunkBuffer(window_chunks=8)
    assert buf.submit(b"HDR") is None
    assert buf.header == b"HDR"
    assert buf.window_size == 0
    assert buf.history_size == 0


def test_window_drains_at_threshold_into_header_prefixed_unit() -> None:
    buf = ChunkBuffer(window_chunks=8)
    buf.submit(b"HDR")
    chunks = _chunks(8)
    for chunk in chunks[:7]:
        assert buf.submit(chunk) is None

    unit = buf.submit(chunks[7])
    assert unit is not None
    assert unit.header == b"HDR"
    assert unit.chunk_count == 8
    assert unit.payload == b"HDR" + b"".join(chunks)
    assert len(unit) == len(unit.payload)
    assert buf.window_size == 0
    assert buf.history_size == 8


def test_window_drains_oldest_chunks_first() -> None:
    buf = ChunkBuffer(window_chunks=3)
    buf.submit(b"H")
    c1, c2, c3, c4, c5, c6 = _chunks(6)

    assert buf.submit(c1) is None
    assert buf.submit(c2) is None
    first = buf.submit(c3)
    assert first is not None and first.chunks == (c1, c2, c3)

    assert buf.submit(c4) is None
    assert buf.window_size == 1
    assert buf.submit(c5) is None
    second = buf.submit(c6)
    assert second is not None and second.chunks == (c4, c5, c6)


def test_final_unit_is_header_plus_entire_history() -> None:
    buf = ChunkBuffer(window_chunks=2)
    buf.submit(b"H")
    chunks = _chunks(5)
    for chunk in chunks:
        buf.submit(chunk)

    final = buf.assemble_final()
    assert final is not None
    assert final.chunks == tuple(chunks)
    assert final.payload.startswith(b"H")
    assert final.payload.count(b"H") == 1


def test_final_unit_is_none_without_audio() -> None:
    buf = ChunkBuffer(window_chunks=8)
    assert buf.assemble_final() is None
    buf.submit(b"H")
    assert buf.assemble_final() is None


def test_reset_forgets_header_and_chunks() -> None:
    buf = ChunkBuffer(window_chunks=8)
    buf.submit(b"H")
    buf.submit(b"x")
    buf.reset()
    assert buf.header is None
    assert buf.window_size == 0
    assert buf.history_size == 0

    buf.submit(b"H2")
    assert buf.header == b"H2"


def test_unit_without_header_fails_fast() -> None:
    buf = ChunkBuffer(window_chunks=1)
    with pytest.raises(MissingHeaderError) as exc_info:
        buf._build_unit((b"orphan",))
    assert exc_info.value.chunk_count == 1


def test_window_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ChunkBuffer(window_chunks=0)
