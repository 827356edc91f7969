"""RFMT CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from hrpipeline.api.deps import DbSession
from hrpipeline.config import settings
from hrpipeline.repositories.rfmt_repo import RFMTRepository
from hrpipeline.repositories.uker_repo import UkerRepository
from hrpipeline.schemas.common import MessageResponse
from hrpipeline.schemas.rfmt import RFMTCreate, RFMTListResponse, RFMTResponse, RFMTUpdate

router = APIRouter()


def _not_found(rfmt_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"RFMT {rfmt_id} not found",
    )


async def _ensure_uker_exists(db: AsyncSession, uker_id: UUID | None) -> None:
    if uker_id and not await UkerRepository(db).get(uker_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Uker {uker_id} not found",
        )


@router.get("", response_model=RFMTListResponse)
async def list_rfmts(
    db: DbSession,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    search: str | None = Query(None, description="Search in PN, name, job grade, branch"),
    pn: str | None = Query(None, description="Exact personnel number"),
) -> RFMTListResponse:
    """List RFMTs with pagination and filters, newest first."""
    repo = RFMTRepository(db)
    rfmts, total = await repo.list_rfmts(
        page=page,
        per_page=limit,
        search=search,
        personnel_number=pn,
    )
    return RFMTListResponse(
        items=rfmts,
        total=total,
        page=page,
        per_page=limit,
        pages=(total + limit - 1) // limit,
    )


@router.get("/pn/{pn}", response_model=list[RFMTResponse])
async def list_rfmts_by_pn(pn: str, db: DbSession) -> list[RFMTResponse]:
    """All RFMTs of one personnel number."""
    repo = RFMTRepository(db)
    return await repo.list_by_personnel_number(pn)


@router.delete("/all", response_model=MessageResponse)
async def delete_all_rfmts(db: DbSession) -> MessageResponse:
    """Permanently delete every RFMT record."""
    repo = RFMTRepository(db)
    deleted = await repo.delete_all()
    return MessageResponse(message=f"All RFMT records deleted successfully ({deleted} rows)")


@router.get("/{rfmt_id}", response_model=RFMTResponse)
async def get_rfmt(rfmt_id: UUID, db: DbSession) -> RFMTResponse:
    """Get a single RFMT."""
    repo = RFMTRepository(db)
    rfmt = await repo.get(rfmt_id)
    if not rfmt:
        raise _not_found(rfmt_id)
    return rfmt


@router.post("", response_model=RFMTResponse, status_code=status.HTTP_201_CREATED)
async def create_rfmt(request: RFMTCreate, db: DbSession) -> RFMTResponse:
    """Create an RFMT."""
    await _ensure_uker_exists(db, request.uker_id)

    repo = RFMTRepository(db)
    return await repo.create(**request.model_dump())


@router.put("/{rfmt_id}", response_model=RFMTResponse)
async def update_rfmt(rfmt_id: UUID, request: RFMTUpdate, db: DbSession) -> RFMTResponse:
    """Update an RFMT. Fields left out of the body are unchanged."""
    await _ensure_uker_exists(db, request.uker_id)

    repo = RFMTRepository(db)
    rfmt = await repo.update(rfmt_id, **request.model_dump(exclude_unset=True))
    if not rfmt:
        raise _not_found(rfmt_id)
    return rfmt


@router.delete("/{rfmt_id}", response_model=MessageResponse)
async def delete_rfmt(rfmt_id: UUID, db: DbSession) -> MessageResponse:
    """Soft delete an RFMT."""
    repo = RFMTRepository(db)
    if not await repo.delete(rfmt_id):
        raise _not_found(rfmt_id)
    return MessageResponse(message="RFMT deleted successfully")
