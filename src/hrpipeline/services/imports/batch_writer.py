"""Fixed-size batching of imported records."""

from collections.abc import Awaitable, Callable, Sequence

import structlog

from hrpipeline.services.imports.exceptions import BatchWriteError
from hrpipeline.services.imports.records import ImportRecord

logger = structlog.get_logger()

BatchSink = Callable[[Sequence[ImportRecord]], Awaitable[object]]


class BatchWriter:
    """
    Accumulate records and hand them to ``sink`` in chunks of ``batch_size``.

    Each chunk is one sink call and succeeds or fails as a unit. Chunks
    written before a failure stay written.
    """

    def __init__(self, sink: BatchSink, batch_size: int = 100):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.sink = sink
        self.batch_size = batch_size
        self.written = 0
        self.batches = 0
        self._pending: list[ImportRecord] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def add(self, record: ImportRecord) -> None:
        """Queue a record, flushing when the batch is full."""
        self._pending.append(record)
        if len(self._pending) >= self.batch_size:
            await self.flush()

    async def flush(self) -> None:
        """Write whatever is pending. No-op when empty.

        Raises:
            BatchWriteError: the sink failed; the pending batch is discarded.
        """
        if not self._pending:
            return

        batch, self._pending = self._pending, []
        try:
            await self.sink(batch)
        except Exception as exc:
            logger.error("Batch insert failed", size=len(batch), batch=self.batches + 1, error=str(exc))
            raise BatchWriteError(len(batch), exc) from exc

        self.batches += 1
        self.written += len(batch)
        logger.debug("Batch flushed", size=len(batch), batch=self.batches, written=self.written)
