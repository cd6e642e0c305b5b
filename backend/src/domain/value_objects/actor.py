"""Actor value object supplied by the identity collaborator."""

from dataclasses import dataclass
from typing import Optional

from domain.enums import ActorRole


@dataclass(frozen=True)
class Actor:
    """
    Immutable value object describing who is invoking an operation.

    The workflow never authenticates actors; it trusts the one it is given.

    Attributes:
        role: Role of the actor (student/staff/hod)
        identity: Registration number for students, staff id otherwise
        year: Academic year (students only)
        section: Section code (students only)
        department: Department (staff and HOD)
    """

    role: ActorRole
    identity: str
    year: Optional[int] = None
    section: Optional[str] = None
    department: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate actor data."""
        if not self.identity or not self.identity.strip():
            raise ValueError("Actor identity cannot be empty")
        if self.year is not None and self.year < 1:
            raise ValueError("Actor year must be a positive integer")

    @property
    def is_student(self) -> bool:
        return self.role == ActorRole.STUDENT

    @property
    def is_reviewer(self) -> bool:
        return self.role in (ActorRole.STAFF, ActorRole.HOD)

    def __str__(self) -> str:
        return f"{self.role.value}:{self.identity}"
