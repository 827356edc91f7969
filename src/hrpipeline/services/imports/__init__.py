"""RFMT CSV import pipeline."""

from hrpipeline.services.imports.batch_writer import BatchWriter
from hrpipeline.services.imports.exceptions import (
    BatchWriteError,
    ImportStateError,
    ImportStreamError,
    InvalidHeaderError,
    RFMTImportError,
    RowSkipped,
)
from hrpipeline.services.imports.importer import ImportSummary, RFMTImporter, remove_upload, stage_upload
from hrpipeline.services.imports.parser import parse_row
from hrpipeline.services.imports.records import ImportRecord
from hrpipeline.services.imports.resolver import UkerResolver
from hrpipeline.services.imports.state import ImportJobState, ImportProgress, ImportStatus

__all__ = [
    "BatchWriter",
    "BatchWriteError",
    "ImportStateError",
    "ImportStreamError",
    "InvalidHeaderError",
    "RFMTImportError",
    "RowSkipped",
    "ImportSummary",
    "RFMTImporter",
    "remove_upload",
    "stage_upload",
    "parse_row",
    "ImportRecord",
    "UkerResolver",
    "ImportJobState",
    "ImportProgress",
    "ImportStatus",
]
