"""Domain record produced by the CSV import."""

from dataclasses import asdict, dataclass
from typing import Any
from uuid import UUID

# Column order of the import file:
# PN;Nama Lengkap;JG;ESGDESC;Kanca;Uker;Uker Tujuan;Keterangan;Kelompok Jabatan RMFT Baru
IMPORT_COLUMNS = (
    "personnel_number",
    "full_name",
    "job_grade",
    "description",
    "branch_name",
    "unit_name",
    "target_unit_name",
    "remarks",
    "new_job_group",
)

REQUIRED_COLUMN_COUNT = len(IMPORT_COLUMNS)


@dataclass
class ImportRecord:
    """One validated row of an RFMT import file."""

    personnel_number: str
    full_name: str = ""
    job_grade: str = ""
    description: str = ""
    branch_name: str = ""
    unit_name: str = ""
    target_unit_name: str = ""
    remarks: str = ""
    new_job_group: str = ""
    unit_id: UUID | None = None

    def to_columns(self) -> dict[str, Any]:
        """Keyword arguments for the ``RFMT`` model."""
        columns = asdict(self)
        columns["uker_id"] = columns.pop("unit_id")
        return columns
