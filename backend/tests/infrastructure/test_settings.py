"""Tests for application settings."""

from infrastructure.config import Settings


class TestSettings:
    def test_workflow_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.batch_max_size == 200
        assert settings.restrict_reviewers_to_department is False
        assert settings.export_filename_prefix == "od"
        assert settings.api_v1_prefix == "/api/v1"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BATCH_MAX_SIZE", "50")
        monkeypatch.setenv("RESTRICT_REVIEWERS_TO_DEPARTMENT", "true")
        settings = Settings(_env_file=None)
        assert settings.batch_max_size == 50
        assert settings.restrict_reviewers_to_department is True

    def test_unused_environment_helpers_are_gone(self):
        assert not hasattr(Settings, "is_sqlite")
        assert not hasattr(Settings, "is_production")
