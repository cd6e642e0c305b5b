"""Tests for the roster query engine and CSV export use case."""

import asyncio
from datetime import date, datetime

import pytest
from application.use_cases import ExportRosterUseCase, RosterQueryEngine
from domain.enums import ODType
from domain.value_objects import RosterQuery
from infrastructure.reporting import HEADERS, RosterCSVExporter

from fakes import InMemoryODApplicationRepository

REFERENCE = date(2025, 10, 16)


class ShuffledRepository(InMemoryODApplicationRepository):
    """Returns everything, unordered, ignoring the query."""

    async def query(self, roster_query):
        return list(reversed(list(self.store.values())))


@pytest.fixture
def roster_applications(make_application, approved_facts):
    return [
        make_application(
            student_identity="21CS103",
            student_name="Arun K",
            start_date=date(2025, 10, 15),
            end_date=date(2025, 10, 17),
            submitted_at=datetime(2025, 10, 2, 8, 0),
            approval=approved_facts,
        ),
        make_application(
            student_identity="21CS101",
            od_type=ODType.EXTERNAL,
            club_name=None,
            college_name="PSG Tech",
            event_name="Paper Presentation",
            role="Presenter",
            start_date=date(2025, 10, 16),
            end_date=date(2025, 10, 16),
            submitted_at=datetime(2025, 10, 1, 8, 0),
            approval=approved_facts,
        ),
        # Starts the day after the reference date
        make_application(
            start_date=date(2025, 10, 17),
            end_date=date(2025, 10, 20),
            approval=approved_facts,
        ),
        # Pending
        make_application(start_date=date(2025, 10, 16), end_date=date(2025, 10, 16)),
    ]


class TestRosterQueryEngine:
    def test_engine_filters_and_orders(self, roster_applications):
        engine = RosterQueryEngine(ShuffledRepository(roster_applications))

        roster = asyncio.run(engine.execute(RosterQuery(reference_date=REFERENCE)))

        assert [a.student_identity for a in roster] == ["21CS101", "21CS103"]

    def test_status_all_includes_pending(self, roster_applications):
        engine = RosterQueryEngine(InMemoryODApplicationRepository(roster_applications))
        roster = asyncio.run(engine.execute(RosterQuery(reference_date=REFERENCE, status=None)))
        assert len(roster) == 3

    def test_facets_are_sorted(self, make_application):
        repository = InMemoryODApplicationRepository(
            [make_application(year=4, section="C"), make_application(year=2, section="A")]
        )
        facets = asyncio.run(RosterQueryEngine(repository).facets())
        assert facets == {"years": [2, 4], "sections": ["A", "C"]}


class TestExportRoster:
    def test_two_approved_rows_give_three_lines(self, roster_applications):
        engine = RosterQueryEngine(InMemoryODApplicationRepository(roster_applications))
        use_case = ExportRosterUseCase(engine, RosterCSVExporter())

        export = asyncio.run(use_case.execute(RosterQuery(reference_date=REFERENCE)))

        lines = export.content.splitlines()
        assert len(lines) == 3
        assert lines[0] == ",".join(HEADERS)
        assert lines[1].startswith("21CS101,Priya S,3,A,external,PSG Tech,Paper Presentation,Presenter,2025-10-16,2025-10-16")
        assert lines[2].endswith("2025-10-15,2025-10-17,approved")
        assert export.row_count == 2
        assert export.filename == "od-approved-2025-10-16.csv"

    def test_empty_roster_exports_header_only(self):
        engine = RosterQueryEngine(InMemoryODApplicationRepository())
        use_case = ExportRosterUseCase(engine, RosterCSVExporter(filename_prefix="attendance"))

        export = asyncio.run(use_case.execute(RosterQuery(reference_date=REFERENCE, status=None)))

        assert export.content == ",".join(HEADERS) + "\n"
        assert export.filename == "attendance-all-2025-10-16.csv"
