"""Pydantic schemas for request/response validation."""

from .health_schemas import HealthResponse
from .od_schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
    BatchTransitionRequest,
    BatchTransitionResponse,
    ErrorDetail,
    ReviewRequest,
    RosterFacetsResponse,
    RosterResponse,
    StudentStatsResponse,
    TransitionOutcomeResponse,
)
from .notification_schemas import MarkReadResponse, NotificationResponse, UnreadCountResponse

__all__ = [
    "HealthResponse",
    "ApplicationCreateRequest",
    "ApplicationResponse",
    "BatchTransitionRequest",
    "BatchTransitionResponse",
    "ErrorDetail",
    "ReviewRequest",
    "RosterFacetsResponse",
    "RosterResponse",
    "StudentStatsResponse",
    "TransitionOutcomeResponse",
    "MarkReadResponse",
    "NotificationResponse",
    "UnreadCountResponse",
]
