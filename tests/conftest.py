"""Shared fixtures for store and config tests."""

import pytest

from interview_questions.storage.database import QuestionStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "questions.db"


@pytest.fixture
def store(db_path):
    s = QuestionStore(db_path)
    assert s.initialize()
    yield s
    s.close()
