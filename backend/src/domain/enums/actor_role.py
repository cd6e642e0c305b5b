"""Roles supplied by the identity collaborator."""

from enum import Enum


class ActorRole(str, Enum):
    """Role held by the person invoking a workflow operation."""

    STUDENT = "student"
    STAFF = "staff"
    HOD = "hod"

    def __str__(self) -> str:
        return self.value
