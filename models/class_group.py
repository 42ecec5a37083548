# models/class_group.py

"""
The ClassGroup model represents one class the teacher runs, e.g. "3A - Math".

Students reference class groups by id; grades are recorded per student and class group.
"""

from __future__ import annotations

import datetime


class ClassGroup:

    def __init__(
        self,
        name: str,
        subject: str = "",
        created_at: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self.name = name
        self._subject = (subject or "").strip()
        self._created_at = created_at or datetime.datetime.now()

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Invalid input. Class name is required.")
        self._name = name.strip()

    @property
    def subject(self) -> str:
        return self._subject

    @subject.setter
    def subject(self, subject: str) -> None:
        self._subject = (subject or "").strip()

    @property
    def created_at(self) -> datetime.datetime:
        return self._created_at

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "name": self._name,
            "subject": self._subject,
            "created_at": self._created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ClassGroup:
        created_at_str = data.get("created_at")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            name=data["name"],
            subject=data.get("subject", ""),
            created_at=(
                datetime.datetime.fromisoformat(created_at_str)
                if created_at_str
                else None
            ),
        )

    def __repr__(self) -> str:
        return f"ClassGroup({self._id}, {self._name}, {self._subject})"

    def __str__(self) -> str:
        return f"CLASS: name: {self._name}, subject: {self._subject}, id: {self._id}"
