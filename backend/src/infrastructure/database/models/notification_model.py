"""Notification SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import Boolean, DateTime, String, Text, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class NotificationModel(Base):
    """SQLAlchemy model for in-app notifications."""
    
    __tablename__ = "notifications"
    
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    recipient_identity: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    event: Mapped[str] = mapped_column(String(32), nullable=False)
    application_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("od_applications.id"),
        nullable=True,
        index=True
    )
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        index=True
    )
    
    def __repr__(self) -> str:
        return f"<NotificationModel(id={self.id}, to={self.recipient_identity})>"
