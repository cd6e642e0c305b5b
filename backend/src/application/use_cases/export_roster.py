"""Use case for exporting a roster as CSV."""

from dataclasses import dataclass

from application.use_cases.query_roster import RosterQueryEngine
from domain.value_objects import RosterQuery
from infrastructure.config import get_logger
from infrastructure.reporting.csv_exporter import RosterCSVExporter


@dataclass(frozen=True)
class RosterExport:
    """A rendered CSV document ready for download."""

    filename: str
    content: str
    row_count: int


class ExportRosterUseCase:
    """Render the roster for a query as a CSV attachment."""

    def __init__(self, engine: RosterQueryEngine, exporter: RosterCSVExporter):
        self.engine = engine
        self.exporter = exporter
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, query: RosterQuery) -> RosterExport:
        applications = await self.engine.execute(query)
        export = RosterExport(
            filename=self.exporter.filename(query),
            content=self.exporter.render(applications),
            row_count=len(applications),
        )
        self.logger.info(f"Exported {export.row_count} row(s) to {export.filename}")
        return export
