"""Integration tests for the SQLAlchemy repositories on SQLite (aiosqlite)."""

import asyncio
from datetime import date, datetime
from uuid import uuid4

import pytest
from application.interfaces import NotificationEvent
from application.use_cases import BatchTransitionCoordinator
from domain.enums import ApplicationStatus, ODType, Transition
from domain.exceptions import ConcurrentModificationError, NotFoundError, PersistenceError
from domain.value_objects import ApprovalFacts, RosterQuery
from infrastructure.database import build_engine, build_session_factory, init_db
from infrastructure.database.repositories import (
    SQLAlchemyNotificationRepository,
    SQLAlchemyODApplicationRepository,
)
from infrastructure.notifications import InAppNotificationService

from fakes import RecordingNotificationService


@pytest.fixture
def run_db(tmp_path):
    """Run ``scenario(session_factory)`` against a fresh SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'od.db'}"

    def _run(scenario):
        async def _main():
            engine = build_engine(url)
            try:
                await init_db(engine)
                return await scenario(build_session_factory(engine))
            finally:
                await engine.dispose()
        return asyncio.run(_main())
    return _run


class DeadlockingODApplicationRepository(SQLAlchemyODApplicationRepository):
    """Runs the UPDATE for ``broken_id`` and then fails like a deadlocked statement."""

    def __init__(self, session, broken_id):
        super().__init__(session)
        self.broken_id = broken_id

    async def compare_and_set(self, application_id, expected_version, approval):
        updated = await super().compare_and_set(application_id, expected_version, approval)
        if application_id == self.broken_id:
            raise RuntimeError("deadlock detected")
        return updated


class ExplodingNotificationRepository(SQLAlchemyNotificationRepository):
    async def add(self, notification):
        await super().add(notification)
        raise RuntimeError("notification store unavailable")


class TestODApplicationRepository:
    def test_create_and_get(self, run_db, make_application):
        application = make_application()

        async def scenario(sessions):
            async with sessions() as session:
                await SQLAlchemyODApplicationRepository(session).create(application)
                await session.commit()
            async with sessions() as session:
                return await SQLAlchemyODApplicationRepository(session).get_by_id(application.id)

        stored = run_db(scenario)
        assert stored.id == application.id
        assert stored.od_type == ODType.INTERNAL
        assert stored.club_name == "Coding Club"
        assert stored.status == ApplicationStatus.PENDING
        assert stored.version == 1

    def test_get_missing_returns_none(self, run_db):
        async def scenario(sessions):
            async with sessions() as session:
                return await SQLAlchemyODApplicationRepository(session).get_by_id(uuid4())

        assert run_db(scenario) is None

    def test_compare_and_set_advances_version(self, run_db, make_application, faculty_approved_facts):
        application = make_application()

        async def scenario(sessions):
            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                await repository.create(application)
                updated = await repository.compare_and_set(application.id, 1, faculty_approved_facts)
                await session.commit()
                return updated

        updated = run_db(scenario)
        assert updated.version == 2
        assert updated.faculty_approved is True
        assert updated.approval.faculty_approved_by == "STF-01"
        assert updated.updated_at is not None

    def test_stale_version_raises_conflict(self, run_db, make_application, faculty_approved_facts):
        application = make_application()
        rejected = ApprovalFacts(rejected=True, rejected_by="STF-02", rejected_at=datetime(2025, 10, 18))

        async def scenario(sessions):
            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                await repository.create(application)
                await repository.compare_and_set(application.id, 1, rejected)
                with pytest.raises(ConcurrentModificationError):
                    await repository.compare_and_set(application.id, 1, faculty_approved_facts)
                return await repository.get_by_id(application.id)

        stored = run_db(scenario)
        assert stored.status == ApplicationStatus.REJECTED
        assert stored.faculty_approved is False
        assert stored.version == 2

    def test_compare_and_set_missing_raises_not_found(self, run_db):
        async def scenario(sessions):
            async with sessions() as session:
                with pytest.raises(NotFoundError):
                    await SQLAlchemyODApplicationRepository(session).compare_and_set(
                        uuid4(), 1, ApprovalFacts()
                    )

        run_db(scenario)

    def test_roster_query(self, run_db, make_application, approved_facts):
        spanning = make_application(
            start_date=date(2025, 10, 15), end_date=date(2025, 10, 17), approval=approved_facts,
            submitted_at=datetime(2025, 10, 2),
        )
        same_day = make_application(
            student_identity="21CS202", section="B",
            start_date=date(2025, 10, 16), end_date=date(2025, 10, 16), approval=approved_facts,
            submitted_at=datetime(2025, 10, 1),
        )
        later = make_application(start_date=date(2025, 10, 17), end_date=date(2025, 10, 20), approval=approved_facts)
        pending = make_application(start_date=date(2025, 10, 16), end_date=date(2025, 10, 16))

        async def scenario(sessions):
            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                for application in (spanning, same_day, later, pending):
                    await repository.create(application)
                approved = await repository.query(RosterQuery(reference_date=date(2025, 10, 16)))
                section_a = await repository.query(
                    RosterQuery(reference_date=date(2025, 10, 16), section="A", status=None)
                )
                return approved, section_a

        approved, section_a = run_db(scenario)
        assert [a.id for a in approved] == [same_day.id, spanning.id]
        assert {a.id for a in section_a} == {spanning.id, pending.id}

    def test_student_reads(self, run_db, make_application, faculty_approved_facts, approved_facts):
        applications = [
            make_application(submitted_at=datetime(2025, 10, 1)),
            make_application(submitted_at=datetime(2025, 10, 2), approval=faculty_approved_facts),
            make_application(submitted_at=datetime(2025, 10, 3), approval=approved_facts),
            make_application(
                submitted_at=datetime(2025, 10, 4),
                approval=ApprovalFacts(cancelled=True, cancelled_at=datetime(2025, 10, 4)),
            ),
            make_application(student_identity="21CS202", year=2, section="B"),
        ]

        async def scenario(sessions):
            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                for application in applications:
                    await repository.create(application)
                return (
                    await repository.list_by_student("21CS101"),
                    await repository.count_by_status("21CS101"),
                    await repository.list_pending_faculty(),
                    await repository.list_pending_hod(),
                    await repository.distinct_facets(),
                )

        mine, counts, faculty_queue, hod_queue, facets = run_db(scenario)
        assert [a.id for a in mine] == [a.id for a in reversed(applications[:4])]
        assert counts == {
            ApplicationStatus.PENDING: 2,
            ApplicationStatus.APPROVED: 1,
            ApplicationStatus.CANCELLED: 1,
        }
        assert {a.id for a in faculty_queue} == {applications[0].id, applications[4].id}
        assert [a.id for a in hod_queue] == [applications[1].id]
        assert sorted(facets["years"]) == [2, 3]
        assert sorted(facets["sections"]) == ["A", "B"]


class TestNotifications:
    def test_notify_and_read(self, run_db, make_application):
        application = make_application()
        event = NotificationEvent(
            event="facultyApprove",
            title="Faculty Approval Granted",
            message="Approved by faculty",
            application_id=application.id,
        )

        async def scenario(sessions):
            async with sessions() as session:
                await SQLAlchemyODApplicationRepository(session).create(application)
                repository = SQLAlchemyNotificationRepository(session)
                service = InAppNotificationService(session, repository)
                await service.notify("21CS101", event)
                await service.notify("21CS101", event)
                await session.commit()

                unread = await repository.count_unread("21CS101")
                listed = await repository.list_for_recipient("21CS101")
                marked = await repository.mark_read(listed[0].id, "21CS101")
                foreign = await repository.mark_read(listed[1].id, "21CS999")
                remaining = await repository.list_for_recipient("21CS101", unread_only=True)
                cleared = await repository.mark_all_read("21CS101")
                return unread, listed, marked, foreign, remaining, cleared

        unread, listed, marked, foreign, remaining, cleared = run_db(scenario)
        assert unread == 2
        assert listed[0].title == "Faculty Approval Granted"
        assert listed[0].application_id == application.id
        assert marked is True
        assert foreign is False
        assert len(remaining) == 1
        assert cleared == 1

    def test_failed_notification_keeps_transition(self, run_db, make_application, faculty_approved_facts):
        application = make_application()

        async def scenario(sessions):
            async with sessions() as session:
                applications = SQLAlchemyODApplicationRepository(session)
                await applications.create(application)
                await applications.compare_and_set(application.id, 1, faculty_approved_facts)
                service = InAppNotificationService(session, ExplodingNotificationRepository(session))
                await service.notify(
                    "21CS101",
                    NotificationEvent(event="facultyApprove", title="t", message="m", application_id=application.id),
                )
                await session.commit()
            async with sessions() as session:
                return (
                    await SQLAlchemyODApplicationRepository(session).get_by_id(application.id),
                    await SQLAlchemyNotificationRepository(session).count_unread("21CS101"),
                )

        stored, unread = run_db(scenario)
        assert stored.faculty_approved is True
        assert stored.version == 2
        assert unread == 0


class TestBatchOnDatabase:
    def test_store_failure_rolls_back_only_that_item(self, run_db, make_application, staff):
        applications = [make_application() for _ in range(3)]
        ids = [a.id for a in applications]

        async def scenario(sessions):
            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                for application in applications:
                    await repository.create(application)
                await session.commit()

            async with sessions() as session:
                coordinator = BatchTransitionCoordinator(
                    DeadlockingODApplicationRepository(session, broken_id=ids[1]),
                    RecordingNotificationService(),
                )
                result = await coordinator.execute(staff, ids, Transition.FACULTY_APPROVE)
                await session.commit()

            async with sessions() as session:
                repository = SQLAlchemyODApplicationRepository(session)
                return result, [await repository.get_by_id(i) for i in ids]

        result, stored = run_db(scenario)
        assert result.succeeded == 2
        assert isinstance(result.outcomes[1].error, PersistenceError)
        assert [a.faculty_approved for a in stored] == [True, False, True]
        assert [a.version for a in stored] == [2, 1, 2]
