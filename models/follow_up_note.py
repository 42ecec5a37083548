# models/follow_up_note.py

"""
A long-form dated journal entry attached to a student, e.g. notes from a parent meeting.
"""

from __future__ import annotations

import datetime


class FollowUpNote:

    def __init__(
        self,
        student_id: str,
        title: str,
        content: str,
        date: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self._student_id = student_id

        if not isinstance(title, str) or not title.strip():
            raise ValueError("Invalid input. The entry title is required.")
        if not isinstance(content, str) or not content.strip():
            raise ValueError("Invalid input. The entry content is required.")

        self._title = title.strip()
        self._content = content.strip()
        self._date = date or datetime.datetime.now()

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def date(self) -> datetime.datetime:
        return self._date

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "student_id": self._student_id,
            "title": self._title,
            "content": self._content,
            "date": self._date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> FollowUpNote:
        date_str = data.get("date")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            student_id=data["student_id"],
            title=data["title"],
            content=data["content"],
            date=datetime.datetime.fromisoformat(date_str) if date_str else None,
        )

    def __repr__(self) -> str:
        return f"FollowUpNote({self._id}, {self._student_id}, {self._title})"
