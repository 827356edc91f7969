"""Database models."""

from hrpipeline.models.base import Base
from hrpipeline.models.uker import Uker
from hrpipeline.models.rfmt import RFMT
from hrpipeline.models.database import async_engine, async_session_maker, init_db, close_db

__all__ = [
    "Base",
    "Uker",
    "RFMT",
    "async_engine",
    "async_session_maker",
    "init_db",
    "close_db",
]
