"""CSV import endpoints for RFMT records."""

from fastapi import APIRouter, BackgroundTasks, File, HTTPException, UploadFile, status
import structlog

from hrpipeline.api.deps import Importer
from hrpipeline.config import settings
from hrpipeline.schemas.imports import ImportProgressResponse, ImportStartResponse
from hrpipeline.services.imports.importer import remove_upload

logger = structlog.get_logger()

router = APIRouter()


def _import_in_progress() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Import already in progress",
    )


@router.post("/import", response_model=ImportStartResponse)
async def import_rfmt_csv(
    importer: Importer,
    background_tasks: BackgroundTasks,
    file: UploadFile = File(..., description="Semicolon-delimited RFMT CSV"),
) -> ImportStartResponse:
    """
    Upload an RFMT CSV and import it in the background.

    ## File format

    - Delimiter: `;`
    - Header row with at least 9 columns:
      `PN;Nama Lengkap;JG;ESGDESC;Kanca;Uker;Uker Tujuan;Keterangan;Kelompok Jabatan RMFT Baru`
    - Rows with fewer than 9 fields or an empty PN are skipped

    Only one import runs at a time; a second upload while one is running
    gets `409 Conflict`. Poll `GET /rfmts/import/progress` for status.
    """
    if importer.state.is_processing:
        raise _import_in_progress()

    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File must be CSV",
        )

    content = await file.read()
    if len(content) > settings.csv_max_file_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {settings.csv_max_file_size_mb} MB",
        )

    try:
        path = importer.stage(file.filename, content)
    except OSError as exc:
        logger.error("Failed to save upload", filename=file.filename, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save uploaded file: {exc}",
        ) from exc

    if not importer.admit():
        remove_upload(path)
        raise _import_in_progress()

    background_tasks.add_task(importer.run, path)
    logger.info("CSV import queued", filename=file.filename, size=len(content))

    return ImportStartResponse(
        message="CSV import started",
        filename=file.filename,
        size=len(content),
    )


@router.get("/import/progress", response_model=ImportProgressResponse)
async def get_import_progress(importer: Importer) -> ImportProgressResponse:
    """Status of the most recent import. Safe to poll at any rate."""
    return ImportProgressResponse(**importer.state.snapshot().to_dict())
