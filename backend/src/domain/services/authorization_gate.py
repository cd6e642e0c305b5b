"""Authorization gate - who may invoke which transition."""

from typing import Optional

from domain.entities import ODApplication
from domain.enums import ActorRole, Transition
from domain.exceptions import AuthorizationError
from domain.value_objects import Actor

REQUIRED_ROLE = {
    Transition.SUBMIT: ActorRole.STUDENT,
    Transition.CANCEL: ActorRole.STUDENT,
    Transition.FACULTY_APPROVE: ActorRole.STAFF,
    Transition.FACULTY_REJECT: ActorRole.STAFF,
    Transition.HOD_APPROVE: ActorRole.HOD,
    Transition.HOD_REJECT: ActorRole.HOD,
}


class AuthorizationGate:
    """
    Pure predicate over (actor, transition, application).

    Role match is always checked here, independently of any UI gating.
    With ``restrict_to_department`` enabled, reviewers only act on
    applications from their own department.
    """

    def __init__(self, restrict_to_department: bool = False):
        self.restrict_to_department = restrict_to_department

    def can_perform(
        self,
        actor: Actor,
        transition: Transition,
        application: Optional[ODApplication] = None,
    ) -> bool:
        return self.denial_reason(actor, transition, application) is None

    def ensure(
        self,
        actor: Actor,
        transition: Transition,
        application: Optional[ODApplication] = None,
    ) -> None:
        """
        Raise if the actor may not perform the transition.

        Raises:
            AuthorizationError: With the reason for the denial
        """
        reason = self.denial_reason(actor, transition, application)
        if reason is not None:
            raise AuthorizationError(reason)

    def denial_reason(
        self,
        actor: Actor,
        transition: Transition,
        application: Optional[ODApplication] = None,
    ) -> Optional[str]:
        """Return why the actor is refused, or None when allowed."""
        transition = Transition(transition)
        required = REQUIRED_ROLE[transition]
        if actor.role != required:
            return f"{transition.value} requires role '{required.value}', actor has '{actor.role.value}'"

        if transition == Transition.SUBMIT or application is None:
            return None

        if transition == Transition.CANCEL:
            if not application.is_owned_by(actor.identity):
                return "students may only cancel their own applications"
            return None

        if application.is_owned_by(actor.identity):
            return "reviewers may not act on their own submission"

        if (
            self.restrict_to_department
            and application.department
            and actor.department != application.department
        ):
            return f"application belongs to department '{application.department}'"
        return None

    def can_view(self, actor: Actor, application: ODApplication) -> bool:
        """Students see their own applications; reviewers see all."""
        if actor.is_student:
            return application.is_owned_by(actor.identity)
        return True
