"""Use cases for reading applications per actor."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.entities import ODApplication
from domain.enums import ActorRole, ApplicationStatus
from domain.exceptions import AuthorizationError, NotFoundError
from domain.repositories import IODApplicationRepository
from domain.services import AuthorizationGate
from domain.value_objects import Actor


@dataclass(frozen=True)
class StudentStats:
    """Per-status counts of one student's applications."""

    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    cancelled: int = 0


class ListApplicationsUseCase:
    """Student history, reviewer queues and single-application lookup."""

    def __init__(
        self,
        repository: IODApplicationRepository,
        gate: Optional[AuthorizationGate] = None,
    ):
        self.repository = repository
        self.gate = gate or AuthorizationGate()

    async def get(self, actor: Actor, application_id: UUID) -> ODApplication:
        """
        Fetch one application the actor is allowed to see.

        Raises:
            NotFoundError: If the id does not exist
            AuthorizationError: If a student asks for someone else's application
        """
        application = await self.repository.get_by_id(application_id)
        if application is None:
            raise NotFoundError(application_id)
        if not self.gate.can_view(actor, application):
            raise AuthorizationError("students may only view their own applications")
        return application

    async def mine(self, actor: Actor) -> list[ODApplication]:
        """A student's own applications, newest first."""
        self._require_role(actor, ActorRole.STUDENT)
        return await self.repository.list_by_student(actor.identity)

    async def stats(self, actor: Actor) -> StudentStats:
        self._require_role(actor, ActorRole.STUDENT)
        counts = await self.repository.count_by_status(actor.identity)
        return StudentStats(
            total=sum(counts.values()),
            pending=counts.get(ApplicationStatus.PENDING, 0),
            approved=counts.get(ApplicationStatus.APPROVED, 0),
            rejected=counts.get(ApplicationStatus.REJECTED, 0),
            cancelled=counts.get(ApplicationStatus.CANCELLED, 0),
        )

    async def review_queue(self, actor: Actor) -> list[ODApplication]:
        """
        Applications waiting on this reviewer's stage.

        Staff get the faculty queue, HOD the HOD queue. With department
        scoping on, only the reviewer's department is listed.
        """
        department = actor.department if self.gate.restrict_to_department else None
        if actor.role == ActorRole.STAFF:
            queue = await self.repository.list_pending_faculty(department)
        elif actor.role == ActorRole.HOD:
            queue = await self.repository.list_pending_hod(department)
        else:
            raise AuthorizationError("review queues are only available to staff and HOD")
        return [application for application in queue if not application.is_owned_by(actor.identity)]

    @staticmethod
    def _require_role(actor: Actor, role: ActorRole) -> None:
        if actor.role != role:
            raise AuthorizationError(f"this view requires role '{role.value}'")
