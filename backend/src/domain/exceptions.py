"""Domain exceptions for the OD approval workflow."""

from typing import Optional
from uuid import UUID


class DomainError(Exception):
    """Base class for every recoverable workflow error."""

    code: str = "domain_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Serialize the error for API responses and batch outcomes."""
        return {"code": self.code, "message": self.message}


class ValidationError(DomainError):
    """Submission data is malformed or inconsistent. Nothing was persisted."""

    code = "validation_error"


class AuthorizationError(DomainError):
    """The actor lacks the role or ownership required for the transition."""

    code = "authorization_error"


class InvalidTransitionError(DomainError):
    """
    A transition guard was violated.

    Attributes:
        current_status: Status of the application when the guard ran
        transition: Transition that was requested
        guard: Human readable precondition that failed
    """

    code = "invalid_transition"

    def __init__(self, current_status: str, transition: str, guard: str):
        self.current_status = str(current_status)
        self.transition = str(transition)
        self.guard = guard
        super().__init__(
            f"Cannot {self.transition} application in status "
            f"'{self.current_status}': {guard}"
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            current_status=self.current_status,
            transition=self.transition,
            guard=self.guard,
        )
        return data


class ConcurrentModificationError(DomainError):
    """The stored version changed between read and write."""

    code = "concurrent_modification"

    def __init__(self, application_id: UUID, expected_version: int):
        self.application_id = application_id
        self.expected_version = expected_version
        super().__init__(
            f"Application {application_id} was modified by another reviewer "
            f"(expected version {expected_version})"
        )


class NotFoundError(DomainError):
    """No record exists for the requested id."""

    code = "not_found"

    def __init__(self, application_id: UUID, entity: Optional[str] = None):
        self.application_id = application_id
        super().__init__(f"{entity or 'Application'} {application_id} not found")


class PersistenceError(DomainError):
    """
    The record store failed while handling one application (deadlock,
    lost connection). Only that application's writes were rolled back.
    """

    code = "persistence_error"

    def __init__(self, application_id: UUID, cause: str):
        self.application_id = application_id
        super().__init__(f"Could not update application {application_id}: {cause}")
