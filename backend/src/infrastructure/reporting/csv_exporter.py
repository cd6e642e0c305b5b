"""CSV rendering of the OD roster."""

import csv
import io
from typing import Iterable

from domain.entities import ODApplication
from domain.value_objects import RosterQuery

HEADERS = [
    "Reg No",
    "Name",
    "Year",
    "Section",
    "OD Type",
    "Club/College",
    "Event",
    "Role",
    "Start Date",
    "End Date",
    "Status",
]

DATE_FORMAT = "%Y-%m-%d"


class RosterCSVExporter:
    """Render roster rows in the attendance-reconciliation CSV layout."""

    def __init__(self, filename_prefix: str = "od"):
        self.filename_prefix = filename_prefix

    def render(self, applications: Iterable[ODApplication]) -> str:
        """
        Render a header row plus one row per application, in the order given.

        Args:
            applications: Roster rows, already filtered and sorted

        Returns:
            CSV text with ``\\n`` line endings
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(HEADERS)
        for application in applications:
            writer.writerow(self._row(application))
        return buffer.getvalue()

    def filename(self, query: RosterQuery) -> str:
        """e.g. ``od-approved-2025-10-16.csv``."""
        return (
            f"{self.filename_prefix}-{query.status_label}-"
            f"{query.reference_date.strftime(DATE_FORMAT)}.csv"
        )

    @staticmethod
    def _row(application: ODApplication) -> list:
        return [
            application.student_identity,
            application.student_name,
            application.year,
            application.section,
            application.od_type.value,
            application.organization_name or "",
            application.event_name,
            application.role,
            application.start_date.strftime(DATE_FORMAT),
            application.end_date.strftime(DATE_FORMAT),
            application.status.value,
        ]
