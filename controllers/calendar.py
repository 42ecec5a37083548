# controllers/calendar.py

"""
The Calendar page: a Monday-first month grid with events and interventions per day, the
unscheduled quick notes, and the drag-and-drop and inline-edit interactions.

Interactions:
    - Dropping a note on a day creates a `general` event at 09:00 on that day, linked to the note,
      and archives the note. The note leaves the unscheduled list before the storage calls run.
    - Dropping an event on the trash opens the delete confirmation. Dropping an event on a day is
      ignored.
    - Confirming a delete removes the event from the view first, then from storage. A failed
      delete is logged and the page refetches, which brings the event back.
    - An open inline edit blocks dragging events.
"""

from __future__ import annotations

import calendar
import datetime
import logging

from controllers.base import PageController
from core.drag_state import DragSession, DragState, PayloadKind, TargetKind
from core.formatters import (
    format_date_iso,
    format_time,
    parse_date_input,
    parse_time_input,
)
from core.response import ErrorCode, Response
from models.calendar_event import CalendarEvent, EventType
from models.intervention import Intervention
from models.quick_note import QuickNote

logger = logging.getLogger(__name__)


class CalendarController(PageController):

    def __init__(self, storage, today: datetime.date | None = None):
        super().__init__(storage)
        self._today = today or datetime.date.today()
        self._current_month = self._today.replace(day=1)
        self._selected_day: datetime.date | None = None

        self._events: list[CalendarEvent] = []
        self._interventions: list[Intervention] = []
        self._notes: list[QuickNote] = []

        self._drag = DragSession()
        self._pending_delete_id: str | None = None

        self._editing_event_id: str | None = None
        self._draft_date = ""
        self._draft_time = ""

    def refresh(self) -> None:
        self._events = self._load_records("events", CalendarEvent.from_dict)
        self._interventions = self._load_records(
            "interventions", Intervention.from_dict
        )
        notes = self._load_records("quick_notes", QuickNote.from_dict)
        self._notes = [n for n in notes if not n.is_archived]

    # === month navigation ===

    @property
    def today(self) -> datetime.date:
        return self._today

    @property
    def current_month(self) -> datetime.date:
        """The first day of the month on screen."""
        return self._current_month

    def change_month(self, delta: int) -> None:
        index = self._current_month.year * 12 + (self._current_month.month - 1) + delta
        year, month = divmod(index, 12)
        self._current_month = datetime.date(year, month + 1, 1)

    def go_to_today(self) -> None:
        self._current_month = self._today.replace(day=1)
        self._selected_day = self._today

    @property
    def month_grid(self) -> list[list[datetime.date | None]]:
        """
        Weeks of the current month, Monday first.

        Slots before the 1st and after the last day of the month are None.
        """
        year, month = self._current_month.year, self._current_month.month
        weeks = calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(
            year, month
        )

        return [
            [datetime.date(year, month, day) if day else None for day in week]
            for week in weeks
        ]

    # === day data ===

    @property
    def selected_day(self) -> datetime.date | None:
        return self._selected_day

    def select_day(self, day: datetime.date) -> None:
        self._selected_day = day

    def clear_selected_day(self) -> None:
        self._selected_day = None

    @property
    def events(self) -> list[CalendarEvent]:
        return list(self._events)

    def find_event(self, event_id: str) -> CalendarEvent | None:
        return next((e for e in self._events if e.id == event_id), None)

    def events_on(self, day: datetime.date) -> list[CalendarEvent]:
        return sorted((e for e in self._events if e.day == day), key=lambda e: e.date)

    def interventions_on(self, day: datetime.date) -> list[Intervention]:
        return [i for i in self._interventions if i.date.date() == day]

    def day_intensity(self, day: datetime.date) -> int:
        return len(self.events_on(day)) + len(self.interventions_on(day))

    @property
    def unscheduled_notes(self) -> list[QuickNote]:
        return list(self._notes)

    # === drag and drop ===

    @property
    def drag(self) -> DragSession:
        return self._drag

    def start_drag_note(self, note_id: str) -> Response:
        if not any(n.id == note_id for n in self._notes):
            return self._not_found("note", note_id)

        return self._start_drag(PayloadKind.NOTE, note_id)

    def start_drag_event(self, event_id: str) -> Response:
        if self._editing_event_id is not None:
            return Response.fail(
                detail="Events cannot be dragged while one is being edited.",
                error=ErrorCode.INVALID_STATE,
            )

        if self.find_event(event_id) is None:
            return self._not_found("event", event_id)

        return self._start_drag(PayloadKind.EVENT, event_id)

    def _start_drag(self, kind: PayloadKind, payload_id: str) -> Response:
        try:
            self._drag.start(kind, payload_id)

        except RuntimeError as e:
            return Response.fail(detail=str(e), error=ErrorCode.INVALID_STATE)

        else:
            return Response.succeed()

    def hover_day(self, day: datetime.date) -> None:
        self._drag.enter(TargetKind.DAY, day)

    def hover_trash(self) -> None:
        self._drag.enter(TargetKind.TRASH)

    def leave_target(self) -> None:
        self._drag.leave()

    def cancel_drag(self) -> None:
        self._drag.cancel()

    def drop(self) -> Response:
        """
        Finishes the active drag and performs whatever the drop means.

        Returns:
            Response: The response of the resulting action, or a successful response with
            `data["accepted"]` False when the drop was ignored.
        """
        if not self._drag.is_dragging:
            return Response.fail(
                detail="Nothing is being dragged.",
                error=ErrorCode.INVALID_STATE,
            )

        kind = self._drag.payload_kind
        payload_id = self._drag.payload_id
        target_value = self._drag.target_value

        if not self._drag.drop():
            return Response.succeed(detail="Drop ignored.", data={"accepted": False})

        if kind is PayloadKind.NOTE:
            return self.drop_note_on_day(payload_id, target_value)

        return self.request_delete(payload_id)

    def drop_note_on_day(self, note_id: str, day: datetime.date) -> Response:
        note = next((n for n in self._notes if n.id == note_id), None)

        if note is None:
            return self._not_found("note", note_id)

        self._notes = [n for n in self._notes if n.id != note_id]

        def action():
            event = CalendarEvent.from_dropped_note(note.content, note.id, day)
            created = self._storage.create("events", event.to_dict())

            try:
                self._storage.update("quick_notes", note_id, {"is_archived": True})
            except Exception:
                # an unarchived note must not leave its event behind
                logger.warning(
                    "Archiving note %s failed, removing event %s", note_id, created["id"]
                )
                self._storage.delete("events", created["id"])
                raise

            return created

        response = self._perform(action, detail="Note scheduled.")

        if not response.success:
            # bring the note back unless it was already archived
            self.refresh()

        return response

    # === delete confirmation ===

    @property
    def pending_delete_id(self) -> str | None:
        return self._pending_delete_id

    @property
    def is_confirming_delete(self) -> bool:
        return self._pending_delete_id is not None

    def request_delete(self, event_id: str) -> Response:
        if self.find_event(event_id) is None:
            return self._not_found("event", event_id)

        self._pending_delete_id = event_id

        return Response.succeed(
            detail="Confirm to delete the event.",
            data={"accepted": True, "event_id": event_id},
        )

    def cancel_delete(self) -> None:
        self._pending_delete_id = None

    def confirm_delete(self) -> Response:
        event_id = self._pending_delete_id

        if event_id is None:
            return Response.fail(
                detail="No event is waiting for delete confirmation.",
                error=ErrorCode.INVALID_STATE,
            )

        self._events = [e for e in self._events if e.id != event_id]
        self._pending_delete_id = None

        try:
            self._storage.delete("events", event_id)

        except Exception as e:
            logger.exception("Delete failed for event %s", event_id)
            self.refresh()
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        self.refresh()

        return Response.succeed(detail="Event deleted.")

    # === inline edit ===

    @property
    def editing_event_id(self) -> str | None:
        return self._editing_event_id

    @property
    def draft_date(self) -> str:
        return self._draft_date

    @property
    def draft_time(self) -> str:
        return self._draft_time

    def start_editing(self, event_id: str) -> Response:
        if self._drag.state in (DragState.DRAGGING, DragState.OVER_TARGET):
            return Response.fail(
                detail="Finish the drag before editing.",
                error=ErrorCode.INVALID_STATE,
            )

        event = self.find_event(event_id)

        if event is None:
            return self._not_found("event", event_id)

        self._editing_event_id = event_id
        self._draft_date = format_date_iso(event.date)
        self._draft_time = format_time(event.date)

        return Response.succeed(data={"event": event})

    def set_draft(self, date_str: str | None = None, time_str: str | None = None) -> None:
        if date_str is not None:
            self._draft_date = date_str.strip()
        if time_str is not None:
            self._draft_time = time_str.strip()

    def cancel_editing(self) -> None:
        self._editing_event_id = None
        self._draft_date = ""
        self._draft_time = ""

    def save_edit(self) -> Response:
        event_id = self._editing_event_id

        if event_id is None:
            return Response.fail(
                detail="No event is being edited.",
                error=ErrorCode.INVALID_STATE,
            )

        if not self._draft_date:
            return Response.succeed(detail="No date entered, nothing saved.")

        def action():
            day = parse_date_input(self._draft_date)
            hours, minutes = parse_time_input(self._draft_time)
            moment = datetime.datetime.combine(day, datetime.time(hours, minutes))

            self._events = [
                CalendarEvent.from_dict({**e.to_dict(), "date": moment.isoformat()})
                if e.id == event_id
                else e
                for e in self._events
            ]
            self.cancel_editing()

            self._storage.update("events", event_id, {"date": moment.isoformat()})

        return self._perform(action, detail="Event moved.")

    # === new events ===

    def add_event(
        self,
        title: str,
        type: EventType | str = EventType.GENERAL,
        time_str: str | None = None,
        day: datetime.date | None = None,
    ) -> Response:
        day = day or self._selected_day

        if day is None:
            return Response.fail(
                detail="Select a day first.",
                error=ErrorCode.INVALID_STATE,
            )

        def action():
            hours, minutes = parse_time_input(time_str)
            event = CalendarEvent(
                title=title,
                date=datetime.datetime.combine(day, datetime.time(hours, minutes)),
                type=EventType(type),
            )
            return self._storage.create("events", event.to_dict())

        return self._perform(action, detail="Event added.")
