"""Per-connection recording session.

Each connection owns one ``RecordingSession``. The message loop calls it
sequentially, so buffer mutations never interleave. Transcription calls are
handed to a single worker task per session: the loop keeps accepting chunks
while a call is in flight, calls for one connection never overlap, and
results are emitted in the order their windows were drained.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from dataclasses import dataclass
from collections.abc import Callable, Awaitable

from scribe.state.outcome import OutcomeKind
from scribe.state.session import SessionState
from scribe.config.websocket import (
    WS_KEY_TYPE,
    MSG_FINAL_TRANSCRIPTION_FAILED,
    MSG_TRANSCRIPTION_UNAVAILABLE,
    WS_ERROR_TRANSCRIPTION_UNAVAILABLE,
    WS_ERROR_FINAL_TRANSCRIPTION_FAILED,
)

from .buffer import ChunkBuffer, DecodableUnit
from .invoker import TranscriptionInvoker
from .events import (
    Event,
    build_error_event,
    build_connection_event,
    build_transcript_event,
    build_recording_started_event,
    build_recording_stopped_event,
)

logger = logging.getLogger(__name__)

EventSink = Callable[[Event], Awaitable[bool]]


@dataclass(frozen=True, slots=True)
class _Job:
    final: bool
    epoch: int
    unit: DecodableUnit | None


class RecordingSession:
    def __init__(
        self,
        connection_id: str,
        *,
        sink: EventSink,
        invoker: TranscriptionInvoker,
        window_chunks: int,
    ) -> None:
        self._sink = sink
        self._invoker = invoker
        self._state = SessionState(connection_id=connection_id)
        self._buffer = ChunkBuffer(window_chunks=window_chunks)
        self._jobs: asyncio.Queue[_Job] = asyncio.Queue()
        self._worker: asyncio.Task | None = None
        self._pending = 0
        self._closed = False

    @property
    def connection_id(self) -> str:
        return self._state.connection_id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def buffer(self) -> ChunkBuffer:
        return self._buffer

    @property
    def is_closed(self) -> bool:
        return self._closed

    def is_busy(self) -> bool:
        return self._state.is_recording or self._pending > 0

    async def announce(self) -> None:
        await self._emit(build_connection_event(self.connection_id))

    async def start(self, consultation_id: str | None) -> None:
        if self._state.is_recording:
            logger.info(
                "start_recording while recording; discarding %d buffered chunk(s) connection_id=%s",
                self._buffer.history_size,
                self.connection_id,
            )
        self._buffer.reset()
        self._state.begin_recording(consultation_id)
        logger.info("recording started consultation_id=%s connection_id=%s", consultation_id, self.connection_id)
        await self._emit(build_recording_started_event(consultation_id))

    async def submit_chunk(self, data: bytes) -> None:
        if not self._state.is_recording:
            logger.info("ignoring audio chunk while idle connection_id=%s bytes=%d", self.connection_id, len(data))
            return

        had_header = self._buffer.header is not None
        unit = self._buffer.submit(data)
        if not had_header:
            logger.debug("stored header chunk connection_id=%s bytes=%d", self.connection_id, len(data))
            return
        if unit is None:
            return
        self._enqueue(_Job(final=False, epoch=self._state.epoch, unit=unit))

    async def stop(self) -> None:
        if not self._state.is_recording:
            logger.info("stop_recording while idle connection_id=%s", self.connection_id)
            await self._emit(build_recording_stopped_event())
            return

        self._state.end_recording()
        logger.info(
            "recording stopped consultation_id=%s connection_id=%s chunks=%d",
            self._state.consultation_id,
            self.connection_id,
            self._buffer.history_size,
        )
        unit = self._buffer.assemble_final()
        self._enqueue(_Job(final=True, epoch=self._state.epoch, unit=unit))
        # Partials queued earlier run first; the final transcript closes the recording.
        await self._jobs.join()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._worker is not None:
            self._worker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._worker
            self._worker = None
        while not self._jobs.empty():
            self._jobs.get_nowait()
            self._jobs.task_done()
        self._pending = 0
        self._buffer.reset()

    def _enqueue(self, job: _Job) -> None:
        if self._closed:
            return
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run_jobs())
        self._pending += 1
        self._jobs.put_nowait(job)

    async def _run_jobs(self) -> None:
        while True:
            job = await self._jobs.get()
            try:
                if job.final:
                    await self._run_final(job)
                else:
                    await self._run_partial(job)
            except Exception:
                logger.exception("transcription job failed connection_id=%s final=%s", self.connection_id, job.final)
            finally:
                self._pending -= 1
                self._jobs.task_done()

    async def _run_partial(self, job: _Job) -> None:
        if job.unit is None:
            return
        if self._closed or job.epoch != self._state.epoch:
            logger.debug("skipping window queued by an earlier recording connection_id=%s", self.connection_id)
            return
        outcome = await self._invoker.transcribe(job.unit, final=job.final, connection_id=self.connection_id)
        if self._closed or job.epoch != self._state.epoch:
            logger.debug("discarding stale partial result connection_id=%s", self.connection_id)
            return

        if outcome.kind is OutcomeKind.TEXT:
            transcript = self._state.append_transcript(outcome.text)
            await self._emit(build_transcript_event(transcript, final=False))
        elif outcome.kind is OutcomeKind.DECODE_FAILED:
            # Undecodable windows are routine and re-arm error reporting.
            self._state.error_sent = False
        elif outcome.kind is OutcomeKind.FAILED:
            if self._state.error_sent:
                logger.info("suppressing repeated transcription error connection_id=%s", self.connection_id)
                return
            self._state.error_sent = True
            await self._emit(build_error_event(MSG_TRANSCRIPTION_UNAVAILABLE, code=WS_ERROR_TRANSCRIPTION_UNAVAILABLE))

    async def _run_final(self, job: _Job) -> None:
        try:
            if job.unit is None:
                logger.info("no audio to transcribe connection_id=%s", self.connection_id)
                return
            outcome = await self._invoker.transcribe(job.unit, final=job.final, connection_id=self.connection_id)
            if outcome.ok:
                await self._emit(build_transcript_event(outcome.text, final=True))
            else:
                await self._emit(
                    build_error_event(MSG_FINAL_TRANSCRIPTION_FAILED, code=WS_ERROR_FINAL_TRANSCRIPTION_FAILED)
                )
        finally:
            await self._emit(build_recording_stopped_event())

    async def _emit(self, event: Event) -> bool:
        if self._closed:
            logger.debug("dropping %s for closed connection_id=%s", event.get(WS_KEY_TYPE), self.connection_id)
            return False
        return await self._sink(event)


__all__ = ["EventSink", "RecordingSession"]
