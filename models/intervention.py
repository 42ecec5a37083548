# models/intervention.py

"""
Represents a logged incident tied to a student: behavior, academic, family, or positive.

Each `Intervention` carries a denormalized copy of the student's full name so lists can be
rendered without resolving the student record, a free-text description, and a pending/resolved
status that the teacher flips once the incident has been dealt with.
"""

from __future__ import annotations

import datetime
from enum import Enum


class InterventionType(str, Enum):
    BEHAVIOR = "behavior"
    ACADEMIC = "academic"
    FAMILY = "family"
    POSITIVE = "positive"


class InterventionStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"


class Intervention:

    def __init__(
        self,
        student_id: str,
        student_name: str,
        type: InterventionType,
        description: str,
        status: InterventionStatus = InterventionStatus.PENDING,
        date: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self._student_id = student_id
        self._student_name = student_name
        self._type = InterventionType(type)
        # description uses setter method for required-field validation
        self.description = description
        self._status = InterventionStatus(status)
        self._date = date or datetime.datetime.now()

    # === properties ===

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
    def student_name(self) -> str:
        return self._student_name

    @property
    def type(self) -> InterventionType:
        return self._type

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, description: str) -> None:
        if not isinstance(description, str) or not description.strip():
            raise ValueError("Invalid input. A description is required.")
        self._description = description.strip()

    @property
    def status(self) -> InterventionStatus:
        return self._status

    @property
    def is_pending(self) -> bool:
        return self._status is InterventionStatus.PENDING

    @property
    def date(self) -> datetime.datetime:
        return self._date

    def toggled_status(self) -> InterventionStatus:
        return (
            InterventionStatus.RESOLVED
            if self.is_pending
            else InterventionStatus.PENDING
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "student_id": self._student_id,
            "student_name": self._student_name,
            "type": self._type.value,
            "description": self._description,
            "status": self._status.value,
            "date": self._date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Intervention:
        date_str = data.get("date")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            student_id=data["student_id"],
            student_name=data.get("student_name", ""),
            type=InterventionType(data["type"]),
            description=data["description"],
            status=InterventionStatus(
                data.get("status", InterventionStatus.PENDING.value)
            ),
            date=datetime.datetime.fromisoformat(date_str) if date_str else None,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Intervention({self._id}, {self._student_id}, {self._type.value}, {self._status.value})"

    def __str__(self) -> str:
        return f"INTERVENTION: {self._student_name}: {self._type.value} ({self._status.value})"
