"""RFMT repository for data access."""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrpipeline.models.rfmt import RFMT

if TYPE_CHECKING:
    from hrpipeline.services.imports.records import ImportRecord


class RFMTRepository:
    """Repository for RFMT CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, rfmt_id: UUID) -> RFMT | None:
        """Get a live (not soft-deleted) RFMT by ID with its unit."""
        result = await self.db.execute(
            select(RFMT)
            .options(selectinload(RFMT.uker))
            .where(RFMT.id == rfmt_id, RFMT.deleted_at.is_(None))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_rfmts(
        self,
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        personnel_number: str | None = None,
    ) -> tuple[list[RFMT], int]:
        """List RFMTs with filtering and pagination, newest first."""
        query = select(RFMT).options(selectinload(RFMT.uker))

        conditions = [RFMT.deleted_at.is_(None)]

        if personnel_number:
            conditions.append(RFMT.personnel_number == personnel_number)

        if search:
            search_term = f"%{search}%"
            conditions.append(
                or_(
                    RFMT.personnel_number.like(search_term),
                    RFMT.full_name.like(search_term),
                    RFMT.job_grade.like(search_term),
                    RFMT.branch_name.like(search_term),
                )
            )

        query = query.where(*conditions)

        # Count total
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await self.db.execute(count_query)
        total = total_result.scalar_one()

        # Apply ordering and pagination
        query = query.order_by(RFMT.created_at.desc())
        offset = (page - 1) * per_page
        query = query.offset(offset).limit(per_page)

        result = await self.db.execute(query)
        rfmts = list(result.scalars().all())

        return rfmts, total

    async def list_by_personnel_number(self, personnel_number: str) -> list[RFMT]:
        """Get every live RFMT for one personnel number."""
        result = await self.db.execute(
            select(RFMT)
            .options(selectinload(RFMT.uker))
            .where(RFMT.personnel_number == personnel_number, RFMT.deleted_at.is_(None))
            .order_by(RFMT.created_at.desc())
        )
        return list(result.scalars().all())

    async def create(self, personnel_number: str, **kwargs) -> RFMT:
        """Create a new RFMT."""
        rfmt = RFMT(personnel_number=personnel_number, **kwargs)

        self.db.add(rfmt)
        await self.db.flush()

        return await self.get(rfmt.id)

    async def create_batch(self, records: Sequence["ImportRecord"]) -> list[RFMT]:
        """Add a batch of imported records in one flush.

        The caller owns the transaction: commit to persist the batch,
        roll back to drop it as a whole.
        """
        rfmts = [RFMT(**record.to_columns()) for record in records]

        self.db.add_all(rfmts)
        await self.db.flush()

        return rfmts

    async def update(self, rfmt_id: UUID, **kwargs) -> RFMT | None:
        """Update an RFMT."""
        rfmt = await self.get(rfmt_id)
        if not rfmt:
            return None

        for key, value in kwargs.items():
            if value is not None and hasattr(rfmt, key):
                setattr(rfmt, key, value)

        await self.db.flush()

        return await self.get(rfmt_id)

    async def delete(self, rfmt_id: UUID) -> bool:
        """Soft delete an RFMT."""
        rfmt = await self.get(rfmt_id)
        if not rfmt:
            return False

        rfmt.deleted_at = datetime.now(timezone.utc)
        await self.db.flush()

        return True

    async def delete_all(self) -> int:
        """Hard delete every RFMT, soft-deleted ones included."""
        result = await self.db.execute(delete(RFMT))
        await self.db.flush()

        return result.rowcount or 0
