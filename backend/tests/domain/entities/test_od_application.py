"""Unit tests for ODApplication entity."""

from datetime import date

import pytest
from domain.enums import ApplicationStatus, ODType
from domain.exceptions import ValidationError


class TestODApplicationCreation:
    """Test validation at submission time."""

    def test_new_application_is_pending(self, make_application):
        """Test a fresh internal application starts pending with no approvals."""
        application = make_application()
        assert application.status == ApplicationStatus.PENDING
        assert application.faculty_approved is False
        assert application.hod_approved is False
        assert application.version == 1

    def test_od_type_string_is_coerced(self, make_application):
        application = make_application(od_type="external", club_name=None, college_name="PSG Tech")
        assert application.od_type == ODType.EXTERNAL

    def test_unknown_od_type_raises_error(self, make_application):
        with pytest.raises(ValidationError, match="Unknown odType"):
            make_application(od_type="sports")

    def test_internal_requires_club(self, make_application):
        with pytest.raises(ValidationError, match="Internal OD requires clubName"):
            make_application(club_name=None)

    def test_internal_rejects_college(self, make_application):
        with pytest.raises(ValidationError, match="Internal OD requires clubName"):
            make_application(college_name="PSG Tech")

    def test_external_requires_college_only(self, make_application):
        with pytest.raises(ValidationError, match="External OD requires collegeName"):
            make_application(od_type=ODType.EXTERNAL, college_name="PSG Tech")

    def test_end_before_start_raises_error(self, make_application):
        with pytest.raises(ValidationError, match="endDate cannot be before startDate"):
            make_application(start_date=date(2025, 10, 22), end_date=date(2025, 10, 20))

    def test_single_day_application_is_valid(self, make_application):
        """Test start == end is accepted (edge case)."""
        application = make_application(start_date=date(2025, 10, 20), end_date=date(2025, 10, 20))
        assert application.duration_days == 1
        assert application.duration == "1 day"

    @pytest.mark.parametrize("field", ["student_name", "section", "role", "event_name"])
    def test_blank_required_field_raises_error(self, make_application, field):
        with pytest.raises(ValidationError, match=f"{field} is required"):
            make_application(**{field: "   "})

    @pytest.mark.parametrize("year", [0, -1, True])
    def test_invalid_year_raises_error(self, make_application, year):
        with pytest.raises(ValidationError, match="year must be a positive integer"):
            make_application(year=year)


class TestODApplicationBehaviour:
    """Test derived properties and versioning."""

    def test_duration_is_inclusive(self, make_application):
        application = make_application()
        assert application.duration_days == 3
        assert application.duration == "3 days"

    def test_organization_name_follows_od_type(self, make_application):
        internal = make_application()
        external = make_application(od_type=ODType.EXTERNAL, club_name=None, college_name="PSG Tech")
        assert internal.organization_name == "Coding Club"
        assert external.organization_name == "PSG Tech"

    def test_covers_is_inclusive_on_both_ends(self, make_application):
        application = make_application()
        assert application.covers(date(2025, 10, 20))
        assert application.covers(date(2025, 10, 22))
        assert not application.covers(date(2025, 10, 19))
        assert not application.covers(date(2025, 10, 23))

    def test_with_approval_advances_version(self, make_application, faculty_approved_facts):
        application = make_application()
        updated = application.with_approval(faculty_approved_facts)

        assert updated.version == 2
        assert updated.faculty_approved is True
        assert updated.updated_at is not None
        assert updated.id == application.id
        # Original untouched
        assert application.version == 1
        assert application.faculty_approved is False

    def test_status_follows_approval_facts(self, make_application, approved_facts):
        application = make_application(approval=approved_facts)
        assert application.status == ApplicationStatus.APPROVED
