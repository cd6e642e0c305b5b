"""Roster query value object - "who is on duty on date X"."""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional, Union

from domain.enums import ApplicationStatus, ODType

if TYPE_CHECKING:
    from domain.entities import ODApplication

ALL = "all"


@dataclass(frozen=True)
class RosterQuery:
    """
    Immutable filter for roster lookups.

    ``None`` on any optional filter means "all" and imposes no constraint.
    ``status`` defaults to approved, matching the dashboard default.
    """

    reference_date: date
    year: Optional[int] = None
    section: Optional[str] = None
    od_type: Optional[ODType] = None
    status: Optional[ApplicationStatus] = ApplicationStatus.APPROVED

    @classmethod
    def from_filters(
        cls,
        reference_date: date,
        year: Union[int, str, None] = ALL,
        section: Optional[str] = ALL,
        od_type: Optional[str] = ALL,
        status: Optional[str] = ApplicationStatus.APPROVED.value,
    ) -> "RosterQuery":
        """
        Build a query from loosely typed filter values where "all" or
        ``None`` disables a filter.

        Raises:
            ValueError: If a filter value is not recognised
        """
        def _given(value) -> bool:
            return value is not None and str(value).strip().lower() not in ("", ALL)

        return cls(
            reference_date=reference_date,
            year=int(year) if _given(year) else None,
            section=section.strip() if _given(section) else None,
            od_type=ODType(str(od_type).lower()) if _given(od_type) else None,
            status=ApplicationStatus(str(status).lower()) if _given(status) else None,
        )

    def matches(self, application: "ODApplication") -> bool:
        """Check a single application against every provided filter."""
        if not application.covers(self.reference_date):
            return False
        if self.year is not None and application.year != self.year:
            return False
        if self.section is not None and application.section != self.section:
            return False
        if self.od_type is not None and application.od_type != self.od_type:
            return False
        if self.status is not None and application.status != self.status:
            return False
        return True

    @staticmethod
    def sort_key(application: "ODApplication") -> tuple:
        """Submission time ascending, ties broken by id."""
        return (application.submitted_at, application.id)

    @property
    def status_label(self) -> str:
        return self.status.value if self.status else ALL
