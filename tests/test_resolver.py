"""Tests for unit resolution by branch name."""

import pytest

from hrpipeline.repositories.uker_repo import UkerRepository
from hrpipeline.services.imports.resolver import UkerResolver


class CountingRepository:
    def __init__(self, result=None):
        self.result = result
        self.queries: list[str] = []

    async def find_active_by_name_contains(self, fragment):
        self.queries.append(fragment)
        return self.result


@pytest.mark.asyncio
async def test_resolves_active_unit_containing_branch_name(seed_ukers, db_session):
    selatan, pusat, _ = await seed_ukers(
        ("001", "KC Jakarta Selatan", True),
        ("002", "KC Jakarta Pusat", True),
        ("003", "KC Bandung", False),
    )
    resolver = UkerResolver(UkerRepository(db_session))

    assert await resolver.resolve("Jakarta Pusat") == pusat.id
    # Several matches: lowest unit code wins
    assert await resolver.resolve("Jakarta") == selatan.id


@pytest.mark.asyncio
async def test_inactive_units_are_not_eligible(seed_ukers, db_session):
    await seed_ukers(("003", "KC Bandung", False))
    resolver = UkerResolver(UkerRepository(db_session))

    assert await resolver.resolve("Bandung") is None


@pytest.mark.asyncio
async def test_like_wildcards_in_branch_name_are_literal(seed_ukers, db_session):
    await seed_ukers(("001", "KC Jakarta", True))
    resolver = UkerResolver(UkerRepository(db_session))

    assert await resolver.resolve("%") is None


@pytest.mark.asyncio
async def test_empty_branch_name_is_not_looked_up():
    repository = CountingRepository()
    resolver = UkerResolver(repository)

    assert await resolver.resolve("") is None
    assert repository.queries == []


@pytest.mark.asyncio
async def test_results_are_cached_per_branch_name():
    repository = CountingRepository()
    resolver = UkerResolver(repository)

    await resolver.resolve("Surabaya")
    await resolver.resolve("Surabaya")

    assert repository.queries == ["Surabaya"]
