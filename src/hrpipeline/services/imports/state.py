"""Lifecycle and progress of the running import job."""

import enum
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

import structlog

from hrpipeline.services.imports.exceptions import ImportStateError

logger = structlog.get_logger()


class ImportStatus(str, enum.Enum):
    """Import job status enum."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class ImportProgress:
    """Consistent snapshot of the job state."""

    status: ImportStatus
    progress: int
    total: int
    message: str

    @property
    def percentage(self) -> int:
        """Whole-number percentage of rows examined."""
        if self.total == 0:
            return 0
        return self.progress * 100 // self.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "progress": self.progress,
            "total": self.total,
            "percentage": self.percentage,
            "message": self.message,
        }


class _ReadWriteLock:
    """Many concurrent readers or one writer; waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ImportJobState:
    """
    State of the most recent import job.

    One instance per application. Admission is the only way into
    ``processing``; every other write requires ``processing`` and leaves the
    state frozen once it reaches ``completed`` or ``error``.
    """

    FIELDS = ("status", "progress", "total", "message")

    def __init__(self) -> None:
        self._lock = _ReadWriteLock()
        self._status = ImportStatus.IDLE
        self._progress = 0
        self._total = 0
        self._message = "No import in progress"

    def try_admit(self) -> bool:
        """Move to ``processing`` unless a job is already running."""
        with self._lock.write():
            if self._status == ImportStatus.PROCESSING:
                return False
            self._status = ImportStatus.PROCESSING
            self._progress = 0
            self._total = 0
            self._message = "Starting import..."

        logger.info("Import admitted")
        return True

    def update(self, **fields: Any) -> None:
        """Write several fields at once while a job is processing."""
        unknown = set(fields) - set(self.FIELDS)
        if unknown:
            raise TypeError(f"Unknown import state fields: {sorted(unknown)}")

        with self._lock.write():
            if self._status != ImportStatus.PROCESSING:
                raise ImportStateError(f"Cannot update import state while {self._status.value}")
            for name, value in fields.items():
                setattr(self, f"_{name}", value)

    def set_total(self, total: int) -> None:
        self.update(total=total, message=f"Processing {total} records...")

    def advance(self) -> int:
        """Count one more examined row and return the new progress."""
        with self._lock.write():
            if self._status != ImportStatus.PROCESSING:
                raise ImportStateError(f"Cannot advance import while {self._status.value}")
            self._progress += 1
            self._message = f"Processed {self._progress} of {self._total} records"
            return self._progress

    def complete(self, message: str) -> None:
        self.update(status=ImportStatus.COMPLETED, message=message)

    def fail(self, message: str) -> None:
        self.update(status=ImportStatus.ERROR, message=message)

    def snapshot(self) -> ImportProgress:
        with self._lock.read():
            return ImportProgress(
                status=self._status,
                progress=self._progress,
                total=self._total,
                message=self._message,
            )

    @property
    def is_processing(self) -> bool:
        return self.snapshot().status == ImportStatus.PROCESSING
