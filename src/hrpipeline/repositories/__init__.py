"""Data access repositories."""

from hrpipeline.repositories.rfmt_repo import RFMTRepository
from hrpipeline.repositories.uker_repo import UkerRepository

__all__ = ["RFMTRepository", "UkerRepository"]
