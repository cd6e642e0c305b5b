"""Domain Enums - Constant values used across the domain."""

from .actor_role import ActorRole
from .od_type import ODType
from .application_status import ApplicationStatus
from .transition import Transition

__all__ = ["ActorRole", "ODType", "ApplicationStatus", "Transition"]
