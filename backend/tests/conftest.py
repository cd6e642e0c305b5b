"""Pytest configuration and shared fixtures."""

from datetime import date, datetime

import pytest
from domain.entities import ODApplication
from domain.enums import ActorRole, ODType
from domain.value_objects import Actor, ApprovalFacts

from fakes import InMemoryODApplicationRepository, RecordingNotificationService


@pytest.fixture
def student():
    """Third-year student in section A."""
    return Actor(role=ActorRole.STUDENT, identity="21CS101", year=3, section="A", department="CSE")


@pytest.fixture
def other_student():
    return Actor(role=ActorRole.STUDENT, identity="21CS202", year=2, section="B", department="CSE")


@pytest.fixture
def staff():
    return Actor(role=ActorRole.STAFF, identity="STF-01", department="CSE")


@pytest.fixture
def hod():
    return Actor(role=ActorRole.HOD, identity="HOD-01", department="CSE")


@pytest.fixture
def make_application():
    """Factory for applications; keyword arguments override the defaults."""
    def _make(**overrides) -> ODApplication:
        data = dict(
            student_identity="21CS101",
            student_name="Priya S",
            year=3,
            section="A",
            department="CSE",
            od_type=ODType.INTERNAL,
            club_name="Coding Club",
            role="Organizer",
            event_name="Hackathon 2025",
            start_date=date(2025, 10, 20),
            end_date=date(2025, 10, 22),
        )
        data.update(overrides)
        return ODApplication(**data)
    return _make


@pytest.fixture
def faculty_approved_facts():
    return ApprovalFacts(
        faculty_approved=True,
        faculty_approved_by="STF-01",
        faculty_approved_at=datetime(2025, 10, 18, 9, 0),
    )


@pytest.fixture
def approved_facts(faculty_approved_facts):
    return ApprovalFacts(
        faculty_approved=True,
        faculty_approved_by=faculty_approved_facts.faculty_approved_by,
        faculty_approved_at=faculty_approved_facts.faculty_approved_at,
        hod_approved=True,
        hod_approved_by="HOD-01",
        hod_approved_at=datetime(2025, 10, 18, 12, 0),
    )


@pytest.fixture
def repository():
    return InMemoryODApplicationRepository()


@pytest.fixture
def notifier():
    return RecordingNotificationService()
