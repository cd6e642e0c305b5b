"""Workflow transitions an actor can request."""

from enum import Enum


class Transition(str, Enum):
    """Actions that move an application through the approval chain."""

    SUBMIT = "submit"
    FACULTY_APPROVE = "facultyApprove"
    FACULTY_REJECT = "facultyReject"
    HOD_APPROVE = "hodApprove"
    HOD_REJECT = "hodReject"
    CANCEL = "cancel"

    @property
    def is_rejection(self) -> bool:
        return self in (Transition.FACULTY_REJECT, Transition.HOD_REJECT)

    def __str__(self) -> str:
        return self.value
