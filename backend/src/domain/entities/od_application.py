"""OD application entity - the central record of the approval workflow."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import ApplicationStatus, ODType
from domain.exceptions import ValidationError
from domain.value_objects import ApprovalFacts


@dataclass(frozen=True)
class ODApplication:
    """
    Entity representing a student's On-Duty leave request.

    Subject data, classification, event metadata and dates are fixed at
    submission. Only ``approval`` changes afterwards, and only through
    ``with_approval``, which also advances ``version`` for optimistic
    concurrency.
    """

    student_identity: str
    student_name: str
    year: int
    section: str
    od_type: ODType
    role: str
    event_name: str
    start_date: date
    end_date: date

    club_name: Optional[str] = None
    college_name: Optional[str] = None
    department: Optional[str] = None
    event_description: Optional[str] = None

    id: UUID = field(default_factory=uuid4)
    submitted_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
    approval: ApprovalFacts = field(default_factory=ApprovalFacts)
    version: int = 1

    def __post_init__(self) -> None:
        """Validate submission data."""
        for name in ("student_identity", "student_name", "section", "role", "event_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{name} is required")

        if isinstance(self.year, bool) or not isinstance(self.year, int) or self.year < 1:
            raise ValidationError("year must be a positive integer")

        try:
            od_type = ODType(self.od_type)
        except ValueError:
            raise ValidationError(f"Unknown odType '{self.od_type}'")
        object.__setattr__(self, "od_type", od_type)

        has_club = bool(self.club_name and self.club_name.strip())
        has_college = bool(self.college_name and self.college_name.strip())
        if od_type == ODType.INTERNAL and (not has_club or has_college):
            raise ValidationError("Internal OD requires clubName and no collegeName")
        if od_type == ODType.EXTERNAL and (not has_college or has_club):
            raise ValidationError("External OD requires collegeName and no clubName")

        if not isinstance(self.start_date, date) or not isinstance(self.end_date, date):
            raise ValidationError("startDate and endDate are required")
        if self.end_date < self.start_date:
            raise ValidationError("endDate cannot be before startDate")

        if self.version < 1:
            raise ValidationError("version must start at 1")

    @property
    def status(self) -> ApplicationStatus:
        """Derived status, always in agreement with the approval facts."""
        return self.approval.status

    @property
    def faculty_approved(self) -> bool:
        return self.approval.faculty_approved

    @property
    def hod_approved(self) -> bool:
        return self.approval.hod_approved

    @property
    def organization_name(self) -> str:
        """Club name for internal OD, college name for external OD."""
        return self.club_name if self.od_type == ODType.INTERNAL else self.college_name

    @property
    def duration_days(self) -> int:
        """Number of calendar days covered, both ends inclusive."""
        return (self.end_date - self.start_date).days + 1

    @property
    def duration(self) -> str:
        days = self.duration_days
        return f"{days} day" if days == 1 else f"{days} days"

    def is_owned_by(self, identity: str) -> bool:
        return self.student_identity == identity

    def covers(self, day: date) -> bool:
        """Check whether ``day`` falls within [start_date, end_date]."""
        return self.start_date <= day <= self.end_date

    def with_approval(self, approval: ApprovalFacts, updated_at: Optional[datetime] = None) -> "ODApplication":
        """Return the next version of this application carrying new approval facts."""
        return replace(
            self,
            approval=approval,
            version=self.version + 1,
            updated_at=updated_at or datetime.utcnow(),
        )

    def __str__(self) -> str:
        return f"ODApplication(id={self.id}, student={self.student_identity}, status={self.status.value})"
