"""In-app notification delivery backed by the notifications table."""

from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import INotificationService, NotificationEvent
from domain.entities import Notification
from domain.repositories import INotificationRepository
from infrastructure.config import get_logger

logger = get_logger(__name__)


class InAppNotificationService(INotificationService):
    """
    Store notifications for recipients to read in the dashboard.

    Each write runs in its own SAVEPOINT so a failure rolls back only the
    notification, never the transition sharing the session.
    """

    def __init__(self, session: AsyncSession, repository: INotificationRepository):
        self.session = session
        self.repository = repository

    async def notify(self, recipient_identity: str, event: NotificationEvent) -> None:
        try:
            async with self.session.begin_nested():
                await self.repository.add(
                    Notification(
                        recipient_identity=recipient_identity,
                        title=event.title,
                        message=event.message,
                        event=event.event,
                        application_id=event.application_id,
                    )
                )
            logger.info(
                f"Notified {recipient_identity}: {event.title}",
                extra={"application_id": event.application_id, "transition": event.event},
            )
        except Exception as e:
            logger.error(
                f"Failed to notify {recipient_identity} about {event.event}: {str(e)}",
                exc_info=True,
            )
