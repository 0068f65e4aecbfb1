"""Pytest configuration and fixtures"""

import pytest

from jobwire.blueprints import build_default_registry
from jobwire.types import FieldSchema, JobCategory, JobSchema


def make_job(**overrides) -> JobSchema:
    """Create a minimal JobSchema with sensible defaults."""

    settings = {
        "id": 99,
        "name": "test_job",
        "label": "Test Job",
        "description": "Test job for unit tests",
        "category": JobCategory.EXECUTION,
    }
    settings.update(overrides)
    return JobSchema(**settings)


def make_field(name: str, **overrides) -> FieldSchema:
    return FieldSchema(name=name, **overrides)


@pytest.fixture
def job_factory():
    """Provide the JobSchema factory to tests."""
    return make_job


@pytest.fixture
def field_factory():
    return make_field


@pytest.fixture(scope="session")
def default_registry():
    """A frozen registry holding the built-in blueprints."""
    return build_default_registry()
