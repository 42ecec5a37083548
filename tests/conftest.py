# tests/conftest.py

import datetime
from unittest.mock import MagicMock

import pytest

from core.i18n import LanguageProvider
from models.calendar_event import CalendarEvent, EventType
from models.class_group import ClassGroup
from models.grade import Grade, GradeType
from models.intervention import Intervention, InterventionType
from models.quick_note import QuickNote
from models.student import Student
from storage.adapter import StorageAdapter
from storage.local_store import LocalStore
from storage.remote_store import RemoteStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # keep a developer's .env from pointing tests at a real database
    monkeypatch.delenv("TEACHERMATE_MONGODB_URI", raising=False)
    monkeypatch.delenv("TEACHERMATE_MONGODB_DATABASE", raising=False)


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def local_store(data_dir):
    return LocalStore(data_dir, seed=False)


@pytest.fixture
def seeded_store(data_dir):
    return LocalStore(data_dir)


@pytest.fixture
def storage(local_store):
    return StorageAdapter(local_store)


@pytest.fixture
def seeded_storage(seeded_store):
    return StorageAdapter(seeded_store)


@pytest.fixture
def mongo_db():
    return MagicMock()


@pytest.fixture
def remote_store(mongo_db):
    return RemoteStore(mongo_db)


@pytest.fixture
def language():
    with LanguageProvider() as lang:
        yield lang


@pytest.fixture
def sample_student():
    return Student(
        first_name="Alex",
        last_name="García",
        contact_info="madre@test.com",
        special_needs=["adhd"],
        groups=["c1"],
        id="s1",
    )


@pytest.fixture
def sample_class_group():
    return ClassGroup(name="3A - Math", subject="Math", id="c1")


@pytest.fixture
def sample_grade():
    return Grade(
        student_id="s1",
        class_group_id="c1",
        title="Unit 1 exam",
        grade=7.5,
        type=GradeType.EXAM,
        date=datetime.datetime(2025, 3, 10, 12, 0),
        id="g1",
    )


@pytest.fixture
def sample_intervention():
    return Intervention(
        student_id="s1",
        student_name="Alex García",
        type=InterventionType.BEHAVIOR,
        description="Constant interruptions in math class.",
        date=datetime.datetime(2025, 3, 10, 9, 30),
        id="i1",
    )


@pytest.fixture
def sample_note():
    return QuickNote(content="Evaluation meeting Tuesday 15:00", id="n1")


@pytest.fixture
def sample_event():
    return CalendarEvent(
        title="Staff meeting",
        date=datetime.datetime(2025, 3, 10, 16, 30),
        type=EventType.MEETING,
        id="e1",
    )
