"""SQLAlchemy ORM models."""

from .od_application_model import ODApplicationModel
from .notification_model import NotificationModel

__all__ = ["ODApplicationModel", "NotificationModel"]
