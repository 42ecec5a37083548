# tests/test_models.py

import datetime

import pytest

from models.calendar_event import CalendarEvent, EventType
from models.class_group import ClassGroup
from models.follow_up_note import FollowUpNote
from models.intervention import Intervention, InterventionStatus, InterventionType
from models.quick_note import NOTE_COLORS, QuickNote
from models.resource import Resource

# === class group ===


def test_class_group_round_trip(sample_class_group):
    class_group = ClassGroup.from_dict(sample_class_group.to_dict())

    assert class_group.id == "c1"
    assert class_group.name == "3A - Math"
    assert class_group.subject == "Math"


def test_class_group_name_is_required():
    with pytest.raises(ValueError):
        ClassGroup(name="")


# === intervention ===


def test_intervention_defaults_to_pending(sample_intervention):
    assert sample_intervention.status is InterventionStatus.PENDING
    assert sample_intervention.is_pending


def test_intervention_toggled_status(sample_intervention):
    assert sample_intervention.toggled_status() is InterventionStatus.RESOLVED

    resolved = Intervention.from_dict(
        {**sample_intervention.to_dict(), "status": "resolved"}
    )

    assert resolved.toggled_status() is InterventionStatus.PENDING


def test_intervention_requires_description():
    with pytest.raises(ValueError):
        Intervention(
            student_id="s1",
            student_name="Alex García",
            type=InterventionType.ACADEMIC,
            description="   ",
        )


def test_intervention_to_dict_uses_storage_values(sample_intervention):
    data = sample_intervention.to_dict()

    assert data["type"] == "behavior"
    assert data["status"] == "pending"
    assert data["student_name"] == "Alex García"


# === follow-up note ===


def test_follow_up_note_round_trip():
    note = FollowUpNote(
        student_id="s1",
        title="Parent meeting",
        content="Agreed on a reading plan.",
        date=datetime.datetime(2025, 3, 11, 17, 0),
    )

    restored = FollowUpNote.from_dict(note.to_dict())

    assert restored.title == "Parent meeting"
    assert restored.date == datetime.datetime(2025, 3, 11, 17, 0)


# === resource ===


def test_resource_matches_title_and_tags():
    resource = Resource(
        title="Past exams", url="https://example.com", tags=["PDF", "Exam"]
    )

    assert resource.matches("past")
    assert resource.matches("pdf")
    assert not resource.matches("video")


def test_resource_requires_url():
    with pytest.raises(ValueError):
        Resource(title="Past exams", url="")


# === quick note ===


def test_quick_note_defaults(sample_note):
    assert sample_note.color == NOTE_COLORS["yellow"]
    assert sample_note.color_name == "yellow"
    assert not sample_note.is_archived


def test_quick_note_rejects_blank_content():
    with pytest.raises(ValueError):
        QuickNote(content="   ")


# === calendar event ===


def test_event_from_dropped_note_is_general_at_nine():
    event = CalendarEvent.from_dropped_note(
        "Evaluation meeting", "n1", datetime.date(2025, 3, 14)
    )

    assert event.date == datetime.datetime(2025, 3, 14, 9, 0)
    assert event.type is EventType.GENERAL
    assert event.linked_note_id == "n1"


def test_event_round_trip(sample_event):
    event = CalendarEvent.from_dict(sample_event.to_dict())

    assert event.title == "Staff meeting"
    assert event.type is EventType.MEETING
    assert event.time_str == "16:30"
    assert event.linked_note_id is None
    assert "linked_note_id" not in sample_event.to_dict()


def test_event_requires_datetime():
    with pytest.raises(TypeError):
        CalendarEvent(title="Exam", date=datetime.date(2025, 3, 14))
