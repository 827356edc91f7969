"""Background import of RFMT records from a CSV upload."""

import asyncio
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hrpipeline.repositories.rfmt_repo import RFMTRepository
from hrpipeline.repositories.uker_repo import UkerRepository
from hrpipeline.services.imports.batch_writer import BatchWriter
from hrpipeline.services.imports.exceptions import (
    BatchWriteError,
    ImportStateError,
    RFMTImportError,
    RowSkipped,
)
from hrpipeline.services.imports.parser import (
    make_reader,
    open_import_file,
    parse_row,
    read_header,
    read_rows,
)
from hrpipeline.services.imports.records import ImportRecord
from hrpipeline.services.imports.resolver import UkerResolver
from hrpipeline.services.imports.state import ImportJobState

logger = structlog.get_logger()

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass
class ImportSummary:
    """Counts for one finished import run."""

    total: int = 0
    imported: int = 0
    skipped: int = 0
    batches: int = 0

    @property
    def message(self) -> str:
        return (
            f"Import completed: {self.imported} of {self.total} records imported, "
            f"{self.skipped} skipped"
        )


def stage_upload(upload_dir: Path, filename: str, content: bytes) -> Path:
    """Write an uploaded file under ``upload_dir`` with a collision-free name."""
    upload_dir.mkdir(parents=True, exist_ok=True)
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", Path(filename).name) or "upload.csv"
    path = upload_dir / f"{uuid4().hex}_{safe_name}"
    path.write_bytes(content)
    return path


def remove_upload(path: Path) -> None:
    """Delete a staged upload, logging instead of raising on failure."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Failed to remove import file", file=str(path), error=str(exc))


class RFMTImporter:
    """
    Runs RFMT CSV imports, one at a time.

    Flow:
    1. ``admit()`` claims the job slot (returns False if a job is running)
    2. ``run(path)`` reads the file, parses each row, resolves its unit,
       and writes records in batches, updating ``state`` after every row
    3. The file is always deleted when ``run`` returns

    ``run`` never raises for import failures; they end up in ``state``.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        state: ImportJobState | None = None,
        batch_size: int = 100,
        upload_dir: Path = Path("./uploads"),
    ):
        self.session_factory = session_factory
        self.state = state or ImportJobState()
        self.batch_size = batch_size
        self.upload_dir = Path(upload_dir)

    def stage(self, filename: str, content: bytes) -> Path:
        """Store an upload where ``run`` can read it."""
        return stage_upload(self.upload_dir, filename, content)

    def admit(self) -> bool:
        return self.state.try_admit()

    async def run(self, path: str | Path) -> ImportSummary | None:
        """Process an admitted job to completion or first fatal error."""
        path = Path(path)
        if not self.state.is_processing:
            raise ImportStateError("run() called without an admitted import")

        log = logger.bind(file=path.name)
        log.info("Import started")

        try:
            summary = await self._process(path, log)
        except BatchWriteError as exc:
            log.error("Import failed", error=str(exc))
            self.state.fail(f"Failed to insert batch: {exc}")
        except RFMTImportError as exc:
            log.error("Import failed", error=str(exc))
            self.state.fail(str(exc))
        except Exception as exc:
            log.exception("Import crashed", error=str(exc))
            self.state.fail(f"Import failed: {exc}")
        else:
            log.info(
                "Import completed",
                total=summary.total,
                imported=summary.imported,
                skipped=summary.skipped,
                batches=summary.batches,
            )
            self.state.complete(summary.message)
            return summary
        finally:
            remove_upload(path)

        return None

    async def _process(self, path: Path, log: structlog.stdlib.BoundLogger) -> ImportSummary:
        rows = await asyncio.to_thread(self._read_file, path)
        self.state.set_total(len(rows))

        summary = ImportSummary(total=len(rows))

        async with self.session_factory() as session:
            rfmt_repo = RFMTRepository(session)
            resolver = UkerResolver(UkerRepository(session))

            async def insert_batch(records: Sequence[ImportRecord]) -> None:
                try:
                    await rfmt_repo.create_batch(records)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

            writer = BatchWriter(insert_batch, batch_size=self.batch_size)

            for index, row in enumerate(rows):
                try:
                    record = parse_row(row, index)
                except RowSkipped as skip:
                    summary.skipped += 1
                    log.debug("Row skipped", row=index, reason=skip.reason)
                else:
                    record.unit_id = await resolver.resolve(record.branch_name)
                    await writer.add(record)

                self.state.advance()

            await writer.flush()

        summary.imported = writer.written
        summary.batches = writer.batches
        return summary

    @staticmethod
    def _read_file(path: Path) -> list[list[str]]:
        with open_import_file(path) as stream:
            reader = make_reader(stream)
            read_header(reader)
            return read_rows(reader)
