"""Domain Repository Interfaces - Abstract definitions."""

from .od_application_repository import IODApplicationRepository
from .notification_repository import INotificationRepository

__all__ = ["IODApplicationRepository", "INotificationRepository"]
