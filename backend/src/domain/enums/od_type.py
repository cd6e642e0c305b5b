"""On-Duty classification."""

from enum import Enum


class ODType(str, Enum):
    """Whether the event is run by an internal club or an external college."""

    INTERNAL = "internal"
    EXTERNAL = "external"

    def __str__(self) -> str:
        return self.value
