"""Batch transition coordinator - applies one transition to many applications."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from application.interfaces import INotificationService, NotificationEvent
from domain.entities import ODApplication
from domain.enums import ActorRole, Transition
from domain.exceptions import DomainError, NotFoundError, PersistenceError, ValidationError
from domain.repositories import IODApplicationRepository
from domain.services import ApprovalStateMachine, AuthorizationGate
from domain.value_objects import Actor
from infrastructure.config import get_logger


@dataclass(frozen=True)
class TransitionOutcome:
    """Result of applying a transition to one application id."""

    application_id: UUID
    success: bool
    application: Optional[ODApplication] = None
    error: Optional[DomainError] = None
    changed: bool = False

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error else None


@dataclass(frozen=True)
class BatchResult:
    """Ordered per-id outcomes of one batch call. Never persisted."""

    transition: Transition
    outcomes: tuple[TransitionOutcome, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)

    def __iter__(self):
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)


_NOTIFICATIONS = {
    Transition.FACULTY_APPROVE: (
        "Faculty Approval Granted",
        "Your OD request for {event} was approved by faculty and sent to the HOD.",
    ),
    Transition.FACULTY_REJECT: (
        "OD Application Rejected",
        "Your OD request for {event} was rejected by faculty.",
    ),
    Transition.HOD_APPROVE: (
        "OD Application Approved",
        "Your OD request for {event} ({start} to {end}) has been approved.",
    ),
    Transition.HOD_REJECT: (
        "OD Application Rejected",
        "Your OD request for {event} was rejected by the HOD.",
    ),
}


def dedupe(application_ids: Iterable[UUID]) -> list[UUID]:
    """Drop repeated ids, keeping first-seen order."""
    seen = set()
    ordered = []
    for application_id in application_ids:
        if application_id not in seen:
            seen.add(application_id)
            ordered.append(application_id)
    return ordered


def review_transition_for(actor: Actor, approve: bool) -> Transition:
    """Pick the faculty or HOD transition matching a reviewer's role."""
    if actor.role == ActorRole.HOD:
        return Transition.HOD_APPROVE if approve else Transition.HOD_REJECT
    return Transition.FACULTY_APPROVE if approve else Transition.FACULTY_REJECT


class BatchTransitionCoordinator:
    """
    Apply a single transition to a set of application ids.

    Each id is handled independently inside its own repository savepoint:
    read, authorize, check the guard, then write through compare-and-set
    against the version that was read. A failing id, including a store
    failure such as a deadlock, becomes a failed outcome and only its own
    writes are rolled back.

    Ids are processed in sorted order so concurrent batches over the same
    ids take row locks in the same order. Outcomes keep request order.
    Lost races surface as ``ConcurrentModificationError`` outcomes and are
    not retried.
    """

    def __init__(
        self,
        repository: IODApplicationRepository,
        notification_service: INotificationService,
        state_machine: Optional[ApprovalStateMachine] = None,
        gate: Optional[AuthorizationGate] = None,
        batch_max_size: int = 200,
    ):
        self.repository = repository
        self.notification_service = notification_service
        self.state_machine = state_machine or ApprovalStateMachine()
        self.gate = gate or AuthorizationGate()
        self.batch_max_size = batch_max_size
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        actor: Actor,
        application_ids: Iterable[UUID],
        transition: Transition,
        remarks: Optional[str] = None,
    ) -> BatchResult:
        """
        Run ``transition`` for every id and aggregate the outcomes.

        Raises:
            ValidationError: For call-level problems only (no ids, too many
                ids, or ``submit`` requested)
        """
        transition = Transition(transition)
        if transition == Transition.SUBMIT:
            raise ValidationError("submit cannot be applied to existing applications")

        ids = dedupe(application_ids)
        if not ids:
            raise ValidationError("At least one application id is required")
        if len(ids) > self.batch_max_size:
            raise ValidationError(
                f"Batch of {len(ids)} exceeds the limit of {self.batch_max_size} applications"
            )

        by_id = {}
        for application_id in sorted(ids):
            by_id[application_id] = await self._apply_one(actor, application_id, transition, remarks)

        result = BatchResult(
            transition=transition,
            outcomes=tuple(by_id[application_id] for application_id in ids),
        )
        self.logger.info(
            f"Batch {transition.value} by {actor}: "
            f"{result.succeeded} succeeded, {result.failed} failed"
        )
        return result

    async def execute_one(
        self,
        actor: Actor,
        application_id: UUID,
        transition: Transition,
        remarks: Optional[str] = None,
    ) -> ODApplication:
        """
        Run ``transition`` for a single id and raise its failure, if any.

        Raises:
            DomainError: The per-item failure for this id
        """
        result = await self.execute(actor, [application_id], transition, remarks)
        outcome = result.outcomes[0]
        if not outcome.success:
            raise outcome.error
        return outcome.application

    async def _apply_one(
        self,
        actor: Actor,
        application_id: UUID,
        transition: Transition,
        remarks: Optional[str],
    ) -> TransitionOutcome:
        try:
            async with self.repository.savepoint():
                updated, changed = await self._transition(actor, application_id, transition, remarks)
        except DomainError as e:
            self.logger.warning(
                f"{transition.value} on {application_id} failed: {e.message}",
                extra={
                    "application_id": application_id,
                    "actor": actor,
                    "transition": transition.value,
                    "error_code": e.code,
                },
            )
            return TransitionOutcome(application_id, False, error=e)
        except Exception as e:
            error = PersistenceError(application_id, str(e))
            self.logger.error(
                f"{transition.value} on {application_id} rolled back: {e}",
                exc_info=True,
                extra={
                    "application_id": application_id,
                    "actor": actor,
                    "transition": transition.value,
                    "error_code": error.code,
                },
            )
            return TransitionOutcome(application_id, False, error=error)

        if not changed:
            self.logger.info(f"{transition.value} on {application_id}: already rejected, no change")
            return TransitionOutcome(application_id, True, application=updated)

        self.logger.info(
            f"{transition.value} on {application_id} by {actor}",
            extra={
                "application_id": application_id,
                "actor": actor,
                "transition": transition.value,
                "status": updated.status.value,
                "version": updated.version,
            },
        )
        await self._notify(updated, transition)
        return TransitionOutcome(application_id, True, application=updated, changed=True)

    async def _transition(
        self,
        actor: Actor,
        application_id: UUID,
        transition: Transition,
        remarks: Optional[str],
    ) -> tuple[ODApplication, bool]:
        """Read, authorize, guard and write one id. Returns (application, changed)."""
        application = await self.repository.get_by_id(application_id)
        if application is None:
            raise NotFoundError(application_id)

        self.gate.ensure(actor, transition, application)

        if self.state_machine.is_noop(application, transition):
            return application, False

        approval = self.state_machine.apply(
            application, transition, actor, remarks=remarks, now=datetime.utcnow()
        )
        updated = await self.repository.compare_and_set(application_id, application.version, approval)
        return updated, True

    async def _notify(self, application: ODApplication, transition: Transition) -> None:
        template = _NOTIFICATIONS.get(transition)
        if template is None:
            return
        title, message = template
        try:
            await self.notification_service.notify(
                application.student_identity,
                NotificationEvent(
                    event=transition.value,
                    title=title,
                    message=message.format(
                        event=application.event_name,
                        start=application.start_date.isoformat(),
                        end=application.end_date.isoformat(),
                    ),
                    application_id=application.id,
                ),
            )
        except Exception as e:
            self.logger.error(f"Notification failed for {application.id}: {e}", exc_info=True)
