"""Chunk buffering: header chunk, drain-on-threshold window and full history."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from scribe.errors import MissingHeaderError


@dataclass(frozen=True, slots=True)
class DecodableUnit:
    """Header plus one or more data chunks; decodable on its own."""

    header: bytes
    chunks: tuple[bytes, ...]

    @property
    def payload(self) -> bytes:
        return b"".join((self.header, *self.chunks))

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    def __len__(self) -> int:
        return len(self.header) + sum(len(c) for c in self.chunks)


class ChunkBuffer:
    """Per-recording audio store.

    The first chunk after a reset is the container header. It never enters
    the window or the history, and prefixes every unit built afterwards.
    """

    def __init__(self, *, window_chunks: int) -> None:
        if window_chunks < 1:
            raise ValueError("window_chunks must be >= 1")
        self.window_chunks = int(window_chunks)
        self._header: bytes | None = None
        self._window: deque[bytes] = deque()
        self._history: list[bytes] = []

    @property
    def header(self) -> bytes | None:
        return self._header

    @property
    def window_size(self) -> int:
        return len(self._window)

    @property
    def history_size(self) -> int:
        return len(self._history)

    def reset(self) -> None:
        self._header = None
        self._window.clear()
        self._history.clear()

    def submit(self, data: bytes) -> DecodableUnit | None:
        """Store a chunk; return a partial unit when the window fills up."""
        if self._header is None:
            self._header = data
            return None

        self._window.append(data)
        self._history.append(data)

        if len(self._window) < self.window_chunks:
            return None

        drained = tuple(self._window.popleft() for _ in range(self.window_chunks))
        return self._build_unit(drained)

    def assemble_final(self) -> DecodableUnit | None:
        """Header plus every chunk of the recording, or None when nothing was recorded."""
        if not self._history:
            return None
        return self._build_unit(tuple(self._history))

    def _build_unit(self, chunks: tuple[bytes, ...]) -> DecodableUnit:
        if self._header is None:
            raise MissingHeaderError(len(chunks))
        return DecodableUnit(header=self._header, chunks=chunks)


__all__ = ["ChunkBuffer", "DecodableUnit"]
