# models/calendar_event.py

"""
The CalendarEvent model represents an entry on the school calendar.

Events carry a full date and time. An event created by dropping a quick note onto a day keeps the
id of that note in `linked_note_id`.
"""

from __future__ import annotations

import datetime
from enum import Enum

# time given to events created by dropping a note on a day
DROP_TIME = datetime.time(9, 0)


class EventType(str, Enum):
    GENERAL = "general"
    EXAM = "exam"
    MEETING = "meeting"


class CalendarEvent:

    def __init__(
        self,
        title: str,
        date: datetime.datetime,
        type: EventType = EventType.GENERAL,
        linked_note_id: str | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id

        if not isinstance(title, str) or not title.strip():
            raise ValueError("Invalid input. The event title is required.")
        if not isinstance(date, datetime.datetime):
            raise TypeError("Invalid input. The event date must be a datetime.")

        self._title = title.strip()
        self._date = date
        self._type = EventType(type)
        self._linked_note_id = linked_note_id

    # === properties ===

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def date(self) -> datetime.datetime:
        return self._date

    @property
    def day(self) -> datetime.date:
        return self._date.date()

    @property
    def time_str(self) -> str:
        return self._date.strftime("%H:%M")

    @property
    def type(self) -> EventType:
        return self._type

    @property
    def linked_note_id(self) -> str | None:
        return self._linked_note_id

    # === persistence and import ===

    def to_dict(self) -> dict:
        data = {
            "id": self._id,
            "owner_id": self._owner_id,
            "title": self._title,
            "date": self._date.isoformat(),
            "type": self._type.value,
        }

        if self._linked_note_id is not None:
            data["linked_note_id"] = self._linked_note_id

        return data

    @classmethod
    def from_dict(cls, data: dict) -> CalendarEvent:
        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            title=data["title"],
            date=datetime.datetime.fromisoformat(data["date"]),
            type=EventType(data.get("type", EventType.GENERAL.value)),
            linked_note_id=data.get("linked_note_id"),
        )

    @classmethod
    def from_dropped_note(
        cls, content: str, note_id: str | None, day: datetime.date
    ) -> CalendarEvent:
        return cls(
            title=content,
            date=datetime.datetime.combine(day, DROP_TIME),
            type=EventType.GENERAL,
            linked_note_id=note_id,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"CalendarEvent({self._id}, {self._title}, {self._date.isoformat()}, {self._type.value})"

    def __str__(self) -> str:
        return f"EVENT: {self._title} at {self._date.isoformat()}"
