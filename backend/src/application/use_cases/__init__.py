"""Use cases - Application workflows."""

from .submit_application import ApplicationDraft, SubmitApplicationUseCase
from .batch_transition import (
    BatchResult,
    BatchTransitionCoordinator,
    TransitionOutcome,
    dedupe,
    review_transition_for,
)
from .query_roster import RosterQueryEngine
from .export_roster import ExportRosterUseCase, RosterExport
from .list_applications import ListApplicationsUseCase, StudentStats

__all__ = [
    "ApplicationDraft",
    "SubmitApplicationUseCase",
    "BatchResult",
    "BatchTransitionCoordinator",
    "TransitionOutcome",
    "dedupe",
    "review_transition_for",
    "RosterQueryEngine",
    "ExportRosterUseCase",
    "RosterExport",
    "ListApplicationsUseCase",
    "StudentStats",
]
