"""RFMT schemas for request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UkerSchema(BaseModel):
    """Organisational unit for nested responses and unit search."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    active: bool


class RFMTBase(BaseModel):
    """Base RFMT schema with the free-text fields."""

    full_name: str = ""
    job_grade: str = ""
    description: str = ""
    branch_name: str = ""
    unit_name: str = ""
    target_unit_name: str = ""
    remarks: str = ""
    new_job_group: str = ""

    @field_validator(
        "full_name",
        "job_grade",
        "description",
        "branch_name",
        "unit_name",
        "target_unit_name",
        "remarks",
        "new_job_group",
        mode="before",
    )
    @classmethod
    def strip_text(cls, v: str | None) -> str:
        """Trim surrounding whitespace; treat null as empty."""
        return (v or "").strip()


class RFMTCreate(RFMTBase):
    """Schema for creating an RFMT."""

    personnel_number: str = Field(..., min_length=1, description="Personnel number (PN)")
    uker_id: UUID | None = None

    @field_validator("personnel_number", mode="before")
    @classmethod
    def strip_personnel_number(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class RFMTUpdate(BaseModel):
    """Schema for updating an RFMT. Omitted fields are left unchanged."""

    personnel_number: str | None = Field(None, min_length=1)
    full_name: str | None = None
    job_grade: str | None = None
    description: str | None = None
    branch_name: str | None = None
    unit_name: str | None = None
    target_unit_name: str | None = None
    remarks: str | None = None
    new_job_group: str | None = None
    uker_id: UUID | None = None

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class RFMTResponse(RFMTBase):
    """Schema for RFMT response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    personnel_number: str
    uker_id: UUID | None = None
    uker: UkerSchema | None = None
    created_at: datetime
    updated_at: datetime


class RFMTListResponse(BaseModel):
    """Paginated list of RFMTs."""

    items: list[RFMTResponse]
    total: int
    page: int
    per_page: int
    pages: int
