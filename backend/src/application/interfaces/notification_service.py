"""Notification service interface for dependency inversion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class NotificationEvent:
    """
    Workflow event handed to the notification collaborator.

    Attributes:
        event: Name of the transition that happened (e.g. "facultyApprove")
        title: Short headline for the recipient
        message: Body text
        application_id: Application concerned
    """

    event: str
    title: str
    message: str
    application_id: Optional[UUID] = None


class INotificationService(ABC):
    """
    Abstract interface for the fire-and-forget notification collaborator.

    Implementations must never raise: a failed notification must not fail
    the transition that triggered it.
    """

    @abstractmethod
    async def notify(self, recipient_identity: str, event: NotificationEvent) -> None:
        """
        Inform a recipient about a workflow event.

        Args:
            recipient_identity: Registration number or staff id
            event: What happened
        """
        pass
