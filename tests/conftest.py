"""Shared pytest fixtures for tutormatch tests."""

import pytest

from tutormatch.domain.models import HourlyRates, Job, Tutor
from tutormatch.logging.context import clear_log_context

ENV_VARS = ("APP_ENV", "LOG_LEVEL", "LOG_FORMAT", "TUTORMATCH_CONFIG")


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no tutormatch environment variables set."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_job():
    """Factory for jobs with sensible defaults."""

    def _make_job(**overrides):
        fields = {
            "subject": "E Maths",
            "level": "Secondary 3-4",
            "location": "Tampines",
            "rate": "$45/hr",
        }
        fields.update(overrides)
        return Job(**fields)

    return _make_job


@pytest.fixture
def make_tutor():
    """Factory for tutors with sensible defaults."""

    def _make_tutor(**overrides):
        fields = {
            "subjects": ["Mathematics"],
            "levels": ["Secondary 3-4"],
            "locations": ["Tampines"],
            "hourly_rates": HourlyRates(min=40, max=50),
        }
        fields.update(overrides)
        return Tutor(**fields)

    return _make_tutor


@pytest.fixture
def math_job(make_job):
    """Job that matches the default tutor on every dimension."""
    return make_job(id="job-1")


@pytest.fixture
def math_tutor(make_tutor):
    """Secondary maths tutor in Tampines charging $40-50/hr."""
    return make_tutor(id="tutor-1", name="Alice Tan", telegram_id="123456")


@pytest.fixture
def empty_tutor():
    """Tutor who declared no preferences at all."""
    return Tutor(id="tutor-empty")
