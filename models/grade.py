# models/grade.py

"""
Represents a single grade a student earned in one class group.

Each `Grade` records the student id, the class group id, a title (e.g. "Unit 1 exam"), a numeric
score on a 0-10 scale, a type (exam, work, or final) and the date it was recorded.

Includes functionality for:
- Validating and updating the score
- Serializing to and from JSON-compatible dictionaries
- Averaging a set of grades

Notes:
- Final grades are a summary of the term, so `average_grade()` leaves them out.
- Averages are rounded half-up to one decimal.
"""

from __future__ import annotations

import datetime
import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Iterable

MIN_GRADE = 0.0
MAX_GRADE = 10.0


class GradeType(str, Enum):
    EXAM = "exam"
    WORK = "work"
    FINAL = "final"


class Grade:

    def __init__(
        self,
        student_id: str,
        class_group_id: str,
        title: str,
        grade: float,
        type: GradeType = GradeType.EXAM,
        date: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self._student_id = student_id
        self._class_group_id = class_group_id
        # title and grade use setter methods for validation
        self.title = title
        self.grade = grade
        self._type = GradeType(type)
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
    def class_group_id(self) -> str:
        return self._class_group_id

    @class_group_id.setter
    def class_group_id(self, class_group_id: str) -> None:
        self._class_group_id = class_group_id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        if not isinstance(title, str) or not title.strip():
            raise ValueError("Invalid input. Grade title is required.")
        self._title = title.strip()

    @property
    def grade(self) -> float:
        return self._grade

    @grade.setter
    def grade(self, grade: Any) -> None:
        self._grade = Grade.validate_grade_input(grade)

    @property
    def type(self) -> GradeType:
        return self._type

    @type.setter
    def type(self, type: GradeType | str) -> None:
        self._type = GradeType(type)

    @property
    def is_final(self) -> bool:
        return self._type is GradeType.FINAL

    @property
    def date(self) -> datetime.datetime:
        return self._date

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "student_id": self._student_id,
            "class_group_id": self._class_group_id,
            "title": self._title,
            "grade": self._grade,
            "type": self._type.value,
            "date": self._date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Grade:
        date_str = data.get("date")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            student_id=data["student_id"],
            class_group_id=data["class_group_id"],
            title=data["title"],
            grade=data["grade"],
            type=GradeType(data.get("type", GradeType.EXAM.value)),
            date=datetime.datetime.fromisoformat(date_str) if date_str else None,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Grade({self._id}, {self._student_id}, {self._class_group_id}, {self._grade}, {self._type.value})"

    def __str__(self) -> str:
        return f"GRADE: {self._title}: {self._grade} ({self._type.value})"

    # === data validators ===

    @staticmethod
    def validate_grade_input(grade: Any) -> float:
        """
        Validates and normalizes a grade value.

        Accepts any input, and then:
            - Casts to float (a comma decimal separator is accepted).
            - Ensures the number is finite.
            - Ensures it lies on the 0-10 scale.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or outside 0-10.
        """
        if isinstance(grade, str):
            grade = grade.strip().replace(",", ".")

        try:
            grade = float(grade)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. The grade must be a number.") from None

        if not math.isfinite(grade):
            raise ValueError("Invalid input. The grade must be a finite number.")

        if not MIN_GRADE <= grade <= MAX_GRADE:
            raise ValueError("Invalid input. The grade must be between 0 and 10.")

        return grade


def average_grade(grades: Iterable[Grade]) -> float | None:
    """
    Averages the non-final grades in `grades`.

    Returns:
        The mean rounded half-up to one decimal, or None when there is nothing to average.
    """
    scores = [g.grade for g in grades if not g.is_final]

    if not scores:
        return None

    mean = sum(Decimal(str(s)) for s in scores) / Decimal(len(scores))

    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
