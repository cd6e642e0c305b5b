"""Database infrastructure module."""

from .session import Base, build_engine, build_session_factory, get_session, init_db, close_db
from .models import ODApplicationModel, NotificationModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_session",
    "init_db",
    "close_db",
    "ODApplicationModel",
    "NotificationModel",
]
