"""Lifecycle states of an OD application."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Derived status of an application. Never stored on its own."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not ApplicationStatus.PENDING

    def __str__(self) -> str:
        return self.value
