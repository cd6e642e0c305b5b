"""Domain Value Objects - Immutable objects without identity."""

from .actor import Actor
from .approval_facts import ApprovalFacts, derive_status
from .roster_query import RosterQuery

__all__ = ["Actor", "ApprovalFacts", "RosterQuery", "derive_status"]
