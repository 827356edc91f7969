"""Organisational unit lookup endpoints."""

from fastapi import APIRouter, Query

from hrpipeline.api.deps import DbSession
from hrpipeline.config import settings
from hrpipeline.repositories.uker_repo import UkerRepository
from hrpipeline.schemas.rfmt import UkerSchema

router = APIRouter()


@router.get("", response_model=list[UkerSchema])
async def search_ukers(
    db: DbSession,
    search: str | None = Query(None, description="Search in unit code and name"),
) -> list[UkerSchema]:
    """Active units for the RFMT form picker, ordered by code."""
    repo = UkerRepository(db)
    return await repo.search(search, limit=settings.uker_search_limit)
