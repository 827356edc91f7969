"""API dependencies for dependency injection."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hrpipeline.models.database import async_session_maker
from hrpipeline.services.imports.importer import RFMTImporter


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_importer(request: Request) -> RFMTImporter:
    """The application's RFMT importer, created in ``create_app``."""
    return request.app.state.rfmt_importer


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
Importer = Annotated[RFMTImporter, Depends(get_importer)]
