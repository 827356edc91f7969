"""Reading and validating semicolon-delimited RFMT import files."""

import csv
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

import structlog

from hrpipeline.services.imports.exceptions import (
    ImportStreamError,
    InvalidHeaderError,
    RowSkipped,
)
from hrpipeline.services.imports.records import REQUIRED_COLUMN_COUNT, ImportRecord

logger = structlog.get_logger()

DELIMITER = ";"


def open_import_file(path: str | Path) -> TextIO:
    """Open an import file for reading.

    Undecodable bytes are replaced rather than raised, so a stray byte
    spoils one field instead of the whole job.
    """
    try:
        return open(path, newline="", encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        raise ImportStreamError(f"Failed to open file: {exc}") from exc


def make_reader(stream: TextIO) -> Iterator[list[str]]:
    """CSV reader with lenient quoting and leading whitespace trimmed."""
    return csv.reader(
        stream,
        delimiter=DELIMITER,
        skipinitialspace=True,
        strict=False,
    )


def read_header(reader: Iterator[list[str]]) -> list[str]:
    """Read the first non-blank row and check it has enough columns."""
    try:
        header = next(reader)
        while not header:
            header = next(reader)
    except StopIteration:
        raise ImportStreamError("Failed to read header: file is empty") from None
    except (csv.Error, OSError) as exc:
        raise ImportStreamError(f"Failed to read header: {exc}") from exc

    if len(header) < REQUIRED_COLUMN_COUNT:
        raise InvalidHeaderError("Invalid CSV format: insufficient columns")

    return header


def read_rows(reader: Iterator[list[str]]) -> list[list[str]]:
    """Read every remaining row into memory.

    Lines the CSV reader cannot parse are dropped and not counted.
    Blank lines are dropped as well.
    """
    rows: list[list[str]] = []
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            logger.debug("Dropping unreadable line", error=str(exc))
            continue

        if row:
            rows.append(row)

    return rows


def parse_row(row: Sequence[str], index: int) -> ImportRecord:
    """Turn one raw row into an ``ImportRecord``.

    Raises:
        RowSkipped: the row has fewer than 9 fields or an empty personnel number.
    """
    if len(row) < REQUIRED_COLUMN_COUNT:
        raise RowSkipped(index, f"expected {REQUIRED_COLUMN_COUNT} fields, got {len(row)}")

    fields = [value.strip() for value in row[:REQUIRED_COLUMN_COUNT]]
    if not fields[0]:
        raise RowSkipped(index, "empty personnel number")

    return ImportRecord(*fields)
