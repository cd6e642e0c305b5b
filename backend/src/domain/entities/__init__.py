"""Domain Entities - Objects with identity."""

from .od_application import ODApplication
from .notification import Notification

__all__ = ["ODApplication", "Notification"]
