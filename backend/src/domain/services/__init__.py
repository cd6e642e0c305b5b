"""Domain Services - Pure workflow rules."""

from .approval_state_machine import ApprovalStateMachine, FACULTY_APPROVAL_REQUIRED
from .authorization_gate import AuthorizationGate, REQUIRED_ROLE

__all__ = [
    "ApprovalStateMachine",
    "AuthorizationGate",
    "FACULTY_APPROVAL_REQUIRED",
    "REQUIRED_ROLE",
]
