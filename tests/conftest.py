"""Shared fixtures: in-memory SQLite database, importer and API client."""

from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hrpipeline.api.deps import get_db
from hrpipeline.main import create_app
from hrpipeline.models import Base, Uker
from hrpipeline.services.imports import ImportJobState, RFMTImporter

HEADER = "PN;Nama;JG;ESGDESC;Kanca;Uker;UkerTujuan;Ket;Kel"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def importer(session_maker, upload_dir) -> RFMTImporter:
    return RFMTImporter(
        session_factory=session_maker,
        state=ImportJobState(),
        batch_size=100,
        upload_dir=upload_dir,
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a CSV file and return its path."""

    def _write(*lines: str, name: str = "import.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def seed_ukers(session_maker):
    """Insert units given as (code, name, active) tuples."""

    async def _seed(*ukers: tuple[str, str, bool]) -> list[Uker]:
        async with session_maker() as session:
            rows = [Uker(code=code, name=name, active=active) for code, name, active in ukers]
            session.add_all(rows)
            await session.commit()
            return rows

    return _seed


@pytest_asyncio.fixture
async def client(session_maker, importer):
    app = create_app()

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.state.rfmt_importer = importer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
