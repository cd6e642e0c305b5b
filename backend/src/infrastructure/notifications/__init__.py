"""Notification delivery implementations."""

from .in_app_notification_service import InAppNotificationService

__all__ = ["InAppNotificationService"]
