"""Tests for the submit application use case."""

import asyncio
from datetime import date

import pytest
from application.use_cases import ApplicationDraft, SubmitApplicationUseCase
from domain.enums import ApplicationStatus, ODType
from domain.exceptions import AuthorizationError, ValidationError

from fakes import RecordingNotificationService


@pytest.fixture
def use_case(repository, notifier):
    return SubmitApplicationUseCase(repository, notifier)


@pytest.fixture
def draft():
    return ApplicationDraft(
        student_name="Priya S",
        od_type="internal",
        club_name="Coding Club",
        role="Organizer",
        event_name="Hackathon 2025",
        start_date=date(2025, 10, 20),
        end_date=date(2025, 10, 22),
    )


class TestSubmitApplication:
    def test_submission_is_pending(self, use_case, repository, notifier, student, draft):
        application = asyncio.run(use_case.execute(student, draft))

        assert application.status == ApplicationStatus.PENDING
        assert application.student_identity == "21CS101"
        assert application.od_type == ODType.INTERNAL
        assert application.id in repository.store
        assert notifier.sent[0][0] == "21CS101"
        assert notifier.sent[0][1].event == "submit"

    def test_actor_details_fill_missing_fields(self, use_case, student, draft):
        application = asyncio.run(use_case.execute(student, draft))
        assert application.year == 3
        assert application.section == "A"
        assert application.department == "CSE"

    def test_whitespace_is_trimmed(self, use_case, student):
        draft = ApplicationDraft(
            student_name="  Priya S ",
            od_type="external",
            college_name=" PSG Tech ",
            club_name="   ",
            role="Speaker",
            event_name="Symposium",
            start_date=date(2025, 11, 3),
            end_date=date(2025, 11, 3),
        )
        application = asyncio.run(use_case.execute(student, draft))
        assert application.student_name == "Priya S"
        assert application.college_name == "PSG Tech"
        assert application.club_name is None

    def test_staff_cannot_submit(self, use_case, repository, staff, draft):
        with pytest.raises(AuthorizationError):
            asyncio.run(use_case.execute(staff, draft))
        assert repository.store == {}

    def test_invalid_draft_persists_nothing(self, use_case, repository, student):
        draft = ApplicationDraft(
            student_name="Priya S",
            od_type="internal",
            club_name="Coding Club",
            college_name="PSG Tech",
            role="Organizer",
            event_name="Hackathon 2025",
            start_date=date(2025, 10, 20),
            end_date=date(2025, 10, 22),
        )
        with pytest.raises(ValidationError):
            asyncio.run(use_case.execute(student, draft))
        assert repository.store == {}

    def test_notification_failure_is_ignored(self, repository, student, draft):
        use_case = SubmitApplicationUseCase(repository, RecordingNotificationService(fail=True))
        application = asyncio.run(use_case.execute(student, draft))
        assert application.id in repository.store
