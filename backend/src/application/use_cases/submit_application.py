"""Use case for submitting a new OD application."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from application.interfaces import INotificationService, NotificationEvent
from domain.entities import ODApplication
from domain.enums import Transition
from domain.repositories import IODApplicationRepository
from domain.services import AuthorizationGate
from domain.value_objects import Actor
from infrastructure.config import get_logger


@dataclass(frozen=True)
class ApplicationDraft:
    """Data a student fills in when requesting On-Duty leave."""

    student_name: str
    od_type: str
    role: str
    event_name: str
    start_date: date
    end_date: date
    year: Optional[int] = None
    section: Optional[str] = None
    department: Optional[str] = None
    club_name: Optional[str] = None
    college_name: Optional[str] = None
    event_description: Optional[str] = None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class SubmitApplicationUseCase:
    """Create a pending application on behalf of a student."""

    def __init__(
        self,
        repository: IODApplicationRepository,
        notification_service: INotificationService,
        gate: Optional[AuthorizationGate] = None,
    ):
        self.repository = repository
        self.notification_service = notification_service
        self.gate = gate or AuthorizationGate()
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, actor: Actor, draft: ApplicationDraft) -> ODApplication:
        """
        Validate and persist a submission.

        Year, section and department fall back to the actor's own values
        when the draft leaves them out.

        Raises:
            AuthorizationError: If the actor is not a student
            ValidationError: If the draft is incomplete or inconsistent
        """
        self.gate.ensure(actor, Transition.SUBMIT)

        application = ODApplication(
            student_identity=actor.identity,
            student_name=_clean(draft.student_name) or "",
            year=draft.year if draft.year is not None else actor.year,
            section=_clean(draft.section) or _clean(actor.section) or "",
            department=_clean(draft.department) or _clean(actor.department),
            od_type=draft.od_type,
            club_name=_clean(draft.club_name),
            college_name=_clean(draft.college_name),
            role=_clean(draft.role) or "",
            event_name=_clean(draft.event_name) or "",
            event_description=_clean(draft.event_description),
            start_date=draft.start_date,
            end_date=draft.end_date,
        )

        created = await self.repository.create(application)
        self.logger.info(
            f"Application {created.id} submitted by {actor.identity} "
            f"({created.od_type.value}, {created.start_date} -> {created.end_date})"
        )

        try:
            await self.notification_service.notify(
                actor.identity,
                NotificationEvent(
                    event=Transition.SUBMIT.value,
                    title="OD Application Submitted",
                    message=(
                        f"Your OD request for {created.event_name} "
                        f"({created.duration}) is awaiting faculty approval."
                    ),
                    application_id=created.id,
                ),
            )
        except Exception as e:
            self.logger.error(f"Notification failed for {created.id}: {e}", exc_info=True)

        return created
