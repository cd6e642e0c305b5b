"""Roster query engine - who is on duty on a given date."""

from domain.entities import ODApplication
from domain.repositories import IODApplicationRepository
from domain.value_objects import RosterQuery
from infrastructure.config import get_logger


class RosterQueryEngine:
    """
    Read-side lookup behind the general dashboard and CSV export.

    The repository may serve a replica or a cached snapshot, so results are
    filtered and ordered again here before they leave the engine.
    """

    def __init__(self, repository: IODApplicationRepository):
        self.repository = repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, query: RosterQuery) -> list[ODApplication]:
        """
        Return applications whose [start_date, end_date] contains the
        reference date and that satisfy every provided filter, ordered by
        submission time then id.
        """
        candidates = await self.repository.query(query)
        roster = sorted(
            (application for application in candidates if query.matches(application)),
            key=RosterQuery.sort_key,
        )
        self.logger.info(
            f"Roster for {query.reference_date.isoformat()} "
            f"(status={query.status_label}): {len(roster)} application(s)"
        )
        return roster

    async def facets(self) -> dict[str, list]:
        """Distinct years and sections for the dashboard filter pickers."""
        facets = await self.repository.distinct_facets()
        return {
            "years": sorted(facets.get("years", [])),
            "sections": sorted(facets.get("sections", [])),
        }
