# models/quick_note.py

"""
Represents a sticky note on the teacher's board.

A `QuickNote` stays on the board and in the calendar's unscheduled list until it is archived,
either by hand or by being dropped onto a calendar day. Archiving is one-way.
"""

from __future__ import annotations

import datetime

# sticky note palette: yellow, blue, green, rose
NOTE_COLORS: dict[str, str] = {
    "yellow": "#fef9c3",
    "blue": "#dbeafe",
    "green": "#dcfce7",
    "rose": "#ffe4e6",
}

DEFAULT_NOTE_COLOR = NOTE_COLORS["yellow"]


class QuickNote:

    def __init__(
        self,
        content: str,
        color: str = DEFAULT_NOTE_COLOR,
        is_archived: bool = False,
        created_at: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self._content = QuickNote.validate_content_input(content)
        self._color = color or DEFAULT_NOTE_COLOR
        self._is_archived = is_archived
        self._created_at = created_at or datetime.datetime.now()

    # === properties ===

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def content(self) -> str:
        return self._content

    @property
    def color(self) -> str:
        return self._color

    @property
    def color_name(self) -> str:
        for name, hex_value in NOTE_COLORS.items():
            if hex_value == self._color:
                return name
        return "yellow"

    @property
    def is_archived(self) -> bool:
        return self._is_archived

    @property
    def created_at(self) -> datetime.datetime:
        return self._created_at

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "content": self._content,
            "color": self._color,
            "is_archived": self._is_archived,
            "created_at": self._created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> QuickNote:
        created_at_str = data.get("created_at")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            content=data["content"],
            color=data.get("color", DEFAULT_NOTE_COLOR),
            is_archived=data.get("is_archived", False),
            created_at=(
                datetime.datetime.fromisoformat(created_at_str)
                if created_at_str
                else None
            ),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"QuickNote({self._id}, {self._color}, {self._is_archived})"

    def __str__(self) -> str:
        return f"NOTE: {self._content}"

    # === data validators ===

    @staticmethod
    def validate_content_input(content: str) -> str:
        if not isinstance(content, str) or not content.strip():
            raise ValueError("Invalid input. A note cannot be empty.")
        return content.strip()
