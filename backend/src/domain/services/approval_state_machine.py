"""Approval state machine - pure transition rules for OD applications."""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from domain.entities import ODApplication
from domain.enums import Transition
from domain.exceptions import InvalidTransitionError
from domain.value_objects import Actor, ApprovalFacts

FACULTY_APPROVAL_REQUIRED = "faculty approval required first"


class ApprovalStateMachine:
    """
    Decides whether a transition is legal for an application and computes
    the resulting approval facts.

    The machine never touches storage and never looks at who the actor is
    beyond recording their identity; role checks belong to
    ``AuthorizationGate``.
    """

    def check(self, application: ODApplication, transition: Transition) -> None:
        """
        Verify the guard for ``transition``.

        Raises:
            InvalidTransitionError: If the guard is violated
        """
        guard = self._violated_guard(application, Transition(transition))
        if guard is not None:
            raise InvalidTransitionError(application.status, transition, guard)

    def is_noop(self, application: ODApplication, transition: Transition) -> bool:
        """Rejecting an already rejected application succeeds without change."""
        return Transition(transition).is_rejection and application.approval.rejected

    def apply(
        self,
        application: ODApplication,
        transition: Transition,
        actor: Actor,
        remarks: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ApprovalFacts:
        """
        Compute the approval facts after ``transition``.

        Args:
            application: Current application state
            transition: Requested transition
            actor: Actor performing it, recorded as approver/rejecter
            remarks: Optional reviewer remarks
            now: Timestamp to record (defaults to utcnow)

        Returns:
            New ApprovalFacts; the current facts unchanged for a no-op reject

        Raises:
            InvalidTransitionError: If the guard is violated
        """
        transition = Transition(transition)
        facts = application.approval
        if self.is_noop(application, transition):
            return facts

        self.check(application, transition)
        now = now or datetime.utcnow()

        if transition == Transition.FACULTY_APPROVE:
            return replace(
                facts,
                faculty_approved=True,
                faculty_approved_by=actor.identity,
                faculty_approved_at=now,
                faculty_remarks=remarks,
            )
        if transition == Transition.FACULTY_REJECT:
            return replace(
                facts,
                rejected=True,
                rejected_by=actor.identity,
                rejected_at=now,
                faculty_remarks=remarks,
            )
        if transition == Transition.HOD_APPROVE:
            return replace(
                facts,
                hod_approved=True,
                hod_approved_by=actor.identity,
                hod_approved_at=now,
                hod_remarks=remarks,
            )
        if transition == Transition.HOD_REJECT:
            return replace(
                facts,
                rejected=True,
                rejected_by=actor.identity,
                rejected_at=now,
                hod_remarks=remarks,
            )
        # CANCEL; SUBMIT never reaches here because its guard always fails
        return replace(facts, cancelled=True, cancelled_at=now)

    def _violated_guard(self, application: ODApplication, transition: Transition) -> Optional[str]:
        facts = application.approval
        status = application.status

        if transition == Transition.SUBMIT:
            return "submit only creates new applications"

        if transition == Transition.CANCEL:
            if status.is_terminal:
                return f"only pending applications can be cancelled (application is {status.value})"
            return None

        if transition in (Transition.HOD_APPROVE, Transition.HOD_REJECT):
            if not facts.faculty_approved:
                return FACULTY_APPROVAL_REQUIRED
            if status.is_terminal:
                return f"application is already {status.value}"
            return None

        # Faculty transitions
        if status.is_terminal:
            return f"application is already {status.value}"
        if facts.faculty_approved:
            return "faculty approval already recorded"
        return None
