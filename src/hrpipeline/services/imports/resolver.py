"""Attach organisational units to imported records by branch name."""

from uuid import UUID

import structlog

from hrpipeline.repositories.uker_repo import UkerRepository

logger = structlog.get_logger()


class UkerResolver:
    """
    Best-effort lookup of the unit an imported record belongs to.

    A unit matches when it is active and its name contains the record's
    branch name. Several matches resolve to the lowest unit code. No match
    leaves the record without a unit.

    Usage:
        resolver = UkerResolver(UkerRepository(session))
        unit_id = await resolver.resolve("KC Jakarta")
    """

    def __init__(self, repository: UkerRepository, cache: dict[str, UUID | None] | None = None):
        """
        Initialize the resolver.

        Args:
            repository: Unit repository bound to the job's session
            cache: Optional dict of branch name to unit id, shared across calls
        """
        self.repository = repository
        self._cache = cache if cache is not None else {}

    async def resolve(self, branch_name: str) -> UUID | None:
        """Return the id of the matching unit, or None."""
        if not branch_name:
            return None

        if branch_name in self._cache:
            return self._cache[branch_name]

        uker = await self.repository.find_active_by_name_contains(branch_name)
        unit_id = uker.id if uker else None
        if unit_id is None:
            logger.debug("No active unit matches branch", branch=branch_name)

        self._cache[branch_name] = unit_id
        return unit_id
