"""In-app notification entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Notification:
    """
    Entity representing a message addressed to one actor identity.

    Attributes:
        recipient_identity: Registration number or staff id of the recipient
        title: Short headline
        message: Body text
        event: Workflow event that produced it (e.g. "hodApprove")
        application_id: Application the event concerns, if any
        is_read: Whether the recipient has acknowledged it
    """

    recipient_identity: str
    title: str
    message: str
    event: str
    application_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    is_read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_read(self) -> None:
        self.is_read = True

    def __str__(self) -> str:
        return f"Notification(id={self.id}, to={self.recipient_identity}, event={self.event})"
