"""Application interfaces - Port definitions for external services."""

from .notification_service import INotificationService, NotificationEvent

__all__ = ["INotificationService", "NotificationEvent"]
