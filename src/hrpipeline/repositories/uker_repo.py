"""Uker repository for data access."""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrpipeline.models.uker import Uker


class UkerRepository:
    """Read-only queries over organisational units."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, uker_id: UUID) -> Uker | None:
        """Get a unit by ID."""
        result = await self.db.execute(select(Uker).where(Uker.id == uker_id))
        return result.scalar_one_or_none()

    async def find_active_by_name_contains(self, fragment: str) -> Uker | None:
        """First active unit whose name contains ``fragment`` (by unit code)."""
        result = await self.db.execute(
            select(Uker)
            .where(Uker.name.contains(fragment, autoescape=True), Uker.active.is_(True))
            .order_by(Uker.code.asc(), Uker.id.asc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def search(self, search: str | None = None, limit: int = 50) -> list[Uker]:
        """Search active units by code or name."""
        query = select(Uker).where(Uker.active.is_(True))

        if search:
            search_term = f"%{search}%"
            query = query.where(
                or_(
                    Uker.code.like(search_term),
                    Uker.name.like(search_term),
                )
            )

        result = await self.db.execute(query.order_by(Uker.code.asc()).limit(limit))
        return list(result.scalars().all())
