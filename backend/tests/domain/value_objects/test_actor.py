"""Unit tests for Actor value object."""

import pytest
from domain.enums import ActorRole
from domain.value_objects import Actor


class TestActor:
    def test_student_actor(self, student):
        assert student.is_student is True
        assert student.is_reviewer is False
        assert str(student) == "student:21CS101"

    def test_reviewer_roles(self, staff, hod):
        assert staff.is_reviewer and hod.is_reviewer

    def test_empty_identity_raises_error(self):
        with pytest.raises(ValueError, match="identity cannot be empty"):
            Actor(role=ActorRole.STAFF, identity="  ")

    def test_non_positive_year_raises_error(self):
        with pytest.raises(ValueError, match="year must be a positive integer"):
            Actor(role=ActorRole.STUDENT, identity="21CS101", year=0)
