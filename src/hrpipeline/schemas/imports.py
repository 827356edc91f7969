"""Import schemas for the CSV upload and progress endpoints."""

from pydantic import BaseModel

from hrpipeline.services.imports.state import ImportStatus


class ImportStartResponse(BaseModel):
    """Acknowledgement that an import job was started."""

    message: str
    filename: str
    size: int


class ImportProgressResponse(BaseModel):
    """Progress of the most recent import job."""

    status: ImportStatus
    progress: int
    total: int
    percentage: int
    message: str
