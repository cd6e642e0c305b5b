"""Notification Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from domain.entities import Notification


class NotificationResponse(BaseModel):
    """Response schema for an in-app notification."""
    
    id: UUID
    title: str
    message: str
    event: str
    application_id: Optional[UUID] = None
    is_read: bool
    created_at: datetime
    
    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            title=notification.title,
            message=notification.message,
            event=notification.event,
            application_id=notification.application_id,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class UnreadCountResponse(BaseModel):
    unread: int = Field(..., ge=0)


class MarkReadResponse(BaseModel):
    updated: int = Field(..., ge=0)
