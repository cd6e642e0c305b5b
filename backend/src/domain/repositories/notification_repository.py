"""Notification repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from uuid import UUID

from domain.entities import Notification


class INotificationRepository(ABC):
    """Abstract repository interface for in-app notifications."""

    @abstractmethod
    async def add(self, notification: Notification) -> Notification:
        """Persist a notification."""
        pass

    @abstractmethod
    async def list_for_recipient(
        self,
        recipient_identity: str,
        unread_only: bool = False,
    ) -> list[Notification]:
        """Return a recipient's notifications, newest first."""
        pass

    @abstractmethod
    async def count_unread(self, recipient_identity: str) -> int:
        """Count unread notifications for a recipient."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: UUID, recipient_identity: str) -> bool:
        """
        Mark one notification as read.

        Returns:
            True if the recipient owns it, False otherwise
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_identity: str) -> int:
        """Mark every unread notification as read and return how many changed."""
        pass
