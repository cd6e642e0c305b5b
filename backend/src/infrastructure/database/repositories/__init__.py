"""Repository implementations."""

from .sqlalchemy_od_application_repository import SQLAlchemyODApplicationRepository
from .sqlalchemy_notification_repository import SQLAlchemyNotificationRepository

__all__ = ["SQLAlchemyODApplicationRepository", "SQLAlchemyNotificationRepository"]
