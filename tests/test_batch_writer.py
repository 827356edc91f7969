"""Tests for fixed-size batching."""

import pytest

from hrpipeline.services.imports.batch_writer import BatchWriter
from hrpipeline.services.imports.exceptions import BatchWriteError
from hrpipeline.services.imports.records import ImportRecord


class RecordingSink:
    """Stores every batch it receives; can fail on a given call number."""

    def __init__(self, fail_on_call: int | None = None):
        self.fail_on_call = fail_on_call
        self.calls = 0
        self.persisted: list[list[ImportRecord]] = []

    async def __call__(self, batch):
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise RuntimeError("disk full")
        self.persisted.append(list(batch))


def make_records(count: int) -> list[ImportRecord]:
    return [ImportRecord(personnel_number=f"{i:05d}") for i in range(count)]


@pytest.mark.asyncio
async def test_250_records_are_written_as_100_100_50():
    sink = RecordingSink()
    writer = BatchWriter(sink, batch_size=100)

    for record in make_records(250):
        await writer.add(record)
    assert writer.pending == 50
    await writer.flush()

    assert [len(batch) for batch in sink.persisted] == [100, 100, 50]
    assert writer.written == 250
    assert writer.batches == 3
    assert writer.pending == 0


@pytest.mark.asyncio
async def test_failure_on_third_batch_keeps_first_two():
    sink = RecordingSink(fail_on_call=3)
    writer = BatchWriter(sink, batch_size=100)

    for record in make_records(250):
        await writer.add(record)

    with pytest.raises(BatchWriteError) as exc_info:
        await writer.flush()

    assert exc_info.value.size == 50
    assert isinstance(exc_info.value.cause, RuntimeError)
    assert [len(batch) for batch in sink.persisted] == [100, 100]
    assert writer.written == 200
    assert writer.pending == 0


@pytest.mark.asyncio
async def test_flush_without_pending_records_does_not_call_sink():
    sink = RecordingSink()
    writer = BatchWriter(sink)

    await writer.flush()

    assert sink.calls == 0


@pytest.mark.asyncio
async def test_batch_is_written_as_soon_as_it_is_full():
    sink = RecordingSink()
    writer = BatchWriter(sink, batch_size=2)

    await writer.add(ImportRecord(personnel_number="1"))
    assert sink.calls == 0
    await writer.add(ImportRecord(personnel_number="2"))

    assert sink.calls == 1


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        BatchWriter(RecordingSink(), batch_size=0)
