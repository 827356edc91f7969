"""Import pipeline errors.

``RowSkipped`` is handled inside the row loop and never ends a job.
Subclasses of ``RFMTImportError`` end the running job with status ``error``.
"""


class RowSkipped(Exception):
    """A row was examined but produces no record."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"row {index}: {reason}")
        self.index = index
        self.reason = reason


class RFMTImportError(Exception):
    """Base class for errors that abort an import job."""


class ImportStreamError(RFMTImportError):
    """The import file could not be opened or its header could not be read."""


class InvalidHeaderError(RFMTImportError):
    """The header row does not have the expected shape."""


class BatchWriteError(RFMTImportError):
    """A batch insert failed; the batch was rolled back."""

    def __init__(self, size: int, cause: Exception):
        super().__init__(str(cause))
        self.size = size
        self.cause = cause


class ImportStateError(Exception):
    """A state write was attempted while no job is processing."""
