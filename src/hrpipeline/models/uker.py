"""Organisational unit (Uker) model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrpipeline.models.base import Base

if TYPE_CHECKING:
    from hrpipeline.models.rfmt import RFMT


class Uker(Base):
    """Organisational unit. Maintained by another system; read-only here."""

    __tablename__ = "ukers"

    code: Mapped[str] = mapped_column("kode_uker", String(50), nullable=False, index=True)
    name: Mapped[str] = mapped_column("nama_uker", String(255), nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    rfmts: Mapped[list["RFMT"]] = relationship("RFMT", back_populates="uker")

    def __repr__(self) -> str:
        return f"<Uker(id={self.id}, code='{self.code}', name='{self.name}')>"
