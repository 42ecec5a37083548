# tests/test_calendar.py

import datetime

import pytest

from controllers.calendar import CalendarController
from core.drag_state import DragState
from core.response import ErrorCode
from models.calendar_event import EventType

TODAY = datetime.date(2025, 3, 10)
FRIDAY = datetime.date(2025, 3, 14)


@pytest.fixture
def calendar_page(storage):
    storage.create("quick_notes", {"content": "Evaluation meeting", "color": "#fef9c3"})
    storage.create(
        "events",
        {"title": "Staff meeting", "date": "2025-03-10T16:30:00", "type": "meeting"},
    )
    page = CalendarController(storage, today=TODAY)
    page.refresh()
    return page


def only_event(page):
    (event,) = page.events
    return event


# === month grid ===


def test_month_grid_starts_on_monday(calendar_page):
    grid = calendar_page.month_grid

    # March 2025 starts on a Saturday
    assert grid[0][:5] == [None] * 5
    assert grid[0][5] == datetime.date(2025, 3, 1)
    assert all(len(week) == 7 for week in grid)
    assert grid[-1][0] == datetime.date(2025, 3, 31)


def test_change_month_wraps_years(calendar_page):
    calendar_page.change_month(-3)

    assert calendar_page.current_month == datetime.date(2024, 12, 1)

    calendar_page.change_month(13)

    assert calendar_page.current_month == datetime.date(2026, 1, 1)

    calendar_page.go_to_today()

    assert calendar_page.current_month == datetime.date(2025, 3, 1)
    assert calendar_page.selected_day == TODAY


def test_day_intensity_counts_events_and_interventions(calendar_page, storage):
    storage.create(
        "interventions",
        {
            "student_id": "s1",
            "student_name": "Alex García",
            "type": "academic",
            "description": "No homework.",
            "status": "pending",
            "date": "2025-03-10T11:00:00",
        },
    )
    calendar_page.refresh()

    assert calendar_page.day_intensity(TODAY) == 2
    assert calendar_page.day_intensity(FRIDAY) == 0


# === dropping notes ===


def test_note_dropped_on_day_becomes_event_at_nine(calendar_page, storage):
    (note,) = calendar_page.unscheduled_notes

    assert calendar_page.start_drag_note(note.id).success
    calendar_page.hover_day(FRIDAY)
    response = calendar_page.drop()

    assert response.success
    (event,) = calendar_page.events_on(FRIDAY)
    assert event.title == "Evaluation meeting"
    assert event.date == datetime.datetime(2025, 3, 14, 9, 0)
    assert event.type is EventType.GENERAL
    assert event.linked_note_id == note.id
    assert len(calendar_page.events) == 2
    assert calendar_page.unscheduled_notes == []
    assert storage.list("quick_notes")[0]["is_archived"] is True


def test_note_dropped_on_trash_is_ignored(calendar_page):
    (note,) = calendar_page.unscheduled_notes
    calendar_page.start_drag_note(note.id)
    calendar_page.hover_trash()

    response = calendar_page.drop()

    assert response.success
    assert not response.accepted
    assert len(calendar_page.unscheduled_notes) == 1
    assert len(calendar_page.events) == 1


def test_event_dropped_on_day_is_ignored(calendar_page):
    event = only_event(calendar_page)
    calendar_page.start_drag_event(event.id)
    calendar_page.hover_day(FRIDAY)

    response = calendar_page.drop()

    assert not response.accepted
    assert only_event(calendar_page).day == TODAY
    assert not calendar_page.is_confirming_delete


def test_drop_without_drag(calendar_page):
    assert calendar_page.drop().error is ErrorCode.INVALID_STATE


def test_failed_note_drop_restores_note(calendar_page, storage, monkeypatch):
    def broken_create(collection, record):
        raise ConnectionError("offline")

    monkeypatch.setattr(storage, "create", broken_create)
    (note,) = calendar_page.unscheduled_notes

    response = calendar_page.drop_note_on_day(note.id, FRIDAY)

    assert response.error is ErrorCode.INTERNAL_ERROR
    assert [n.id for n in calendar_page.unscheduled_notes] == [note.id]


def test_failed_archive_removes_new_event(calendar_page, storage, monkeypatch):
    working_update = storage.update

    def broken_update(collection, id, partial):
        raise ConnectionError("offline")

    monkeypatch.setattr(storage, "update", broken_update)
    (note,) = calendar_page.unscheduled_notes

    response = calendar_page.drop_note_on_day(note.id, FRIDAY)

    assert response.error is ErrorCode.INTERNAL_ERROR
    assert calendar_page.events_on(FRIDAY) == []
    assert [e["title"] for e in storage.list("events")] == ["Staff meeting"]
    assert [n.id for n in calendar_page.unscheduled_notes] == [note.id]

    monkeypatch.setattr(storage, "update", working_update)

    assert calendar_page.drop_note_on_day(note.id, FRIDAY).success
    assert len(calendar_page.events_on(FRIDAY)) == 1
    assert calendar_page.unscheduled_notes == []


# === deleting events ===


def test_event_on_trash_needs_confirmation(calendar_page, storage):
    event = only_event(calendar_page)
    calendar_page.start_drag_event(event.id)
    calendar_page.hover_trash()

    assert calendar_page.drag.is_trash_active

    response = calendar_page.drop()

    assert response.data == {"accepted": True, "event_id": event.id}
    assert calendar_page.pending_delete_id == event.id
    assert len(storage.list("events")) == 1

    assert calendar_page.confirm_delete().success
    assert calendar_page.events == []
    assert storage.list("events") == []
    assert not calendar_page.is_confirming_delete


def test_cancel_delete_keeps_event(calendar_page, storage):
    event = only_event(calendar_page)
    calendar_page.request_delete(event.id)

    calendar_page.cancel_delete()

    assert not calendar_page.is_confirming_delete
    assert len(storage.list("events")) == 1
    assert calendar_page.confirm_delete().error is ErrorCode.INVALID_STATE


def test_confirm_delete_removes_only_that_event(calendar_page, storage):
    calendar_page.add_event("Exam 3A", EventType.EXAM, "10:00", day=FRIDAY)
    exam = calendar_page.events_on(FRIDAY)[0]

    calendar_page.request_delete(exam.id)
    calendar_page.confirm_delete()

    assert [e["title"] for e in storage.list("events")] == ["Staff meeting"]


def test_failed_delete_brings_event_back(calendar_page, storage, monkeypatch):
    def broken_delete(collection, id):
        raise ConnectionError("offline")

    monkeypatch.setattr(storage, "delete", broken_delete)
    event = only_event(calendar_page)
    calendar_page.request_delete(event.id)

    response = calendar_page.confirm_delete()

    assert response.error is ErrorCode.INTERNAL_ERROR
    assert only_event(calendar_page).id == event.id


# === inline edit ===


def test_inline_edit_moves_event(calendar_page, storage):
    event = only_event(calendar_page)

    assert calendar_page.start_editing(event.id).success
    assert calendar_page.draft_date == "2025-03-10"
    assert calendar_page.draft_time == "16:30"

    calendar_page.set_draft("2025-03-14", "08:15")

    assert calendar_page.save_edit().success
    assert calendar_page.editing_event_id is None
    assert storage.list("events")[0]["date"] == "2025-03-14T08:15:00"
    assert only_event(calendar_page).date == datetime.datetime(2025, 3, 14, 8, 15)


def test_inline_edit_missing_time_means_midnight(calendar_page, storage):
    event = only_event(calendar_page)
    calendar_page.start_editing(event.id)
    calendar_page.set_draft("2025-03-14", "")

    calendar_page.save_edit()

    assert storage.list("events")[0]["date"] == "2025-03-14T00:00:00"


def test_inline_edit_without_date_saves_nothing(calendar_page, storage):
    event = only_event(calendar_page)
    calendar_page.start_editing(event.id)
    calendar_page.set_draft("", "08:00")

    assert calendar_page.save_edit().success
    assert storage.list("events")[0]["date"] == "2025-03-10T16:30:00"


def test_inline_edit_rejects_bad_date(calendar_page):
    event = only_event(calendar_page)
    calendar_page.start_editing(event.id)
    calendar_page.set_draft("14/03/2025", "08:00")

    assert calendar_page.save_edit().error is ErrorCode.INVALID_FIELD_VALUE
    assert calendar_page.editing_event_id == event.id


def test_editing_blocks_event_drag(calendar_page):
    event = only_event(calendar_page)
    calendar_page.start_editing(event.id)

    assert calendar_page.start_drag_event(event.id).error is ErrorCode.INVALID_STATE
    assert calendar_page.drag.state is DragState.IDLE

    calendar_page.cancel_editing()

    assert calendar_page.start_drag_event(event.id).success


# === new events ===


def test_add_event_needs_a_day(calendar_page):
    assert calendar_page.add_event("Exam").error is ErrorCode.INVALID_STATE

    calendar_page.select_day(FRIDAY)

    assert calendar_page.add_event("Exam", "exam", "12:00").success
    (exam,) = calendar_page.events_on(FRIDAY)
    assert exam.time_str == "12:00"
    assert exam.type is EventType.EXAM
