"""Shared fixtures: the two-course catalog and a throwaway progress database."""

import pytest

from pensum.schemas import Catalog, Course
from pensum.tracker import CourseStateController, ProgressStore


@pytest.fixture
def catalog():
    return Catalog(
        name="Test",
        total_career_credits=150,
        courses=[
            Course(id="A", name="Course A", level=1, credits=3),
            Course(id="B", name="Course B", level=1, credits=4, reference_document="syllabus/B.pdf"),
        ],
    )


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "progress.db"


@pytest.fixture
def store(db_path):
    return ProgressStore(db_path)


@pytest.fixture
def controller(catalog, store):
    return CourseStateController(catalog, store)
