"""SQLAlchemy implementation of the notification repository."""

from uuid import UUID
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Notification
from domain.repositories import INotificationRepository
from infrastructure.database.models import NotificationModel


class SQLAlchemyNotificationRepository(INotificationRepository):
    """Concrete implementation of INotificationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def add(self, notification: Notification) -> Notification:
        model = NotificationModel(
            id=notification.id,
            recipient_identity=notification.recipient_identity,
            title=notification.title,
            message=notification.message,
            event=notification.event,
            application_id=notification.application_id,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )
        self.session.add(model)
        await self.session.flush()
        return self._model_to_entity(model)
    
    async def list_for_recipient(
        self,
        recipient_identity: str,
        unread_only: bool = False,
    ) -> list[Notification]:
        stmt = select(NotificationModel).where(
            NotificationModel.recipient_identity == recipient_identity
        )
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read == False)  # noqa: E712
        stmt = stmt.order_by(NotificationModel.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def count_unread(self, recipient_identity: str) -> int:
        stmt = select(func.count(NotificationModel.id)).where(
            NotificationModel.recipient_identity == recipient_identity,
            NotificationModel.is_read == False,  # noqa: E712
        )
        return (await self.session.scalar(stmt)) or 0
    
    async def mark_read(self, notification_id: UUID, recipient_identity: str) -> bool:
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_identity == recipient_identity,
            )
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
    
    async def mark_all_read(self, recipient_identity: str) -> int:
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.recipient_identity == recipient_identity,
                NotificationModel.is_read == False,  # noqa: E712
            )
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
    
    def _model_to_entity(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_identity=model.recipient_identity,
            title=model.title,
            message=model.message,
            event=model.event,
            application_id=model.application_id,
            is_read=model.is_read,
            created_at=model.created_at,
        )
