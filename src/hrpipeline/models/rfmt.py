"""RFMT model - a personnel reassignment record."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrpipeline.models.base import Base

if TYPE_CHECKING:
    from hrpipeline.models.uker import Uker


class RFMT(Base):
    """Personnel reassignment record.

    Column names follow the source spreadsheet (``pn``, ``nama_lengkap``,
    ``kanca`` ...), attribute names are English.
    """

    __tablename__ = "rfmts"

    # Foreign Key (resolved from the branch name at import time)
    uker_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("ukers.id", ondelete="SET NULL"),
        index=True,
    )

    # Personnel
    personnel_number: Mapped[str] = mapped_column("pn", String(50), nullable=False, index=True)
    full_name: Mapped[str] = mapped_column("nama_lengkap", String(255), default="")
    job_grade: Mapped[str] = mapped_column("jg", String(50), default="")
    description: Mapped[str] = mapped_column("esgdesc", Text, default="")

    # Placement
    branch_name: Mapped[str] = mapped_column("kanca", String(255), default="", index=True)
    unit_name: Mapped[str] = mapped_column("uker", String(255), default="")
    target_unit_name: Mapped[str] = mapped_column("uker_tujuan", String(255), default="")
    remarks: Mapped[str] = mapped_column("keterangan", Text, default="")
    new_job_group: Mapped[str] = mapped_column("kelompok_jabatan_rmft", String(255), default="")

    # Soft delete
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)

    # Relationships
    uker: Mapped["Uker | None"] = relationship("Uker", back_populates="rfmts")

    def __repr__(self) -> str:
        return f"<RFMT(id={self.id}, pn='{self.personnel_number}')>"
