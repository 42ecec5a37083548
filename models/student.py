# models/student.py

"""
Represents a student on the teacher's roster.

Stores identifying information (first and last name), a free-text contact field for parents or
guardians, a list of special-needs tags, and the ids of every class group the student belongs to.
A student may belong to any number of class groups, including none.

Includes functionality for:
- Validating required name input
- Joining and leaving class groups
- Serializing to and from JSON-compatible dictionaries

Notes:
- `owner_id` and `id` are assigned by the storage layer; a freshly built student has neither.
- Removing a student does not touch grades or interventions that reference it.
"""

from __future__ import annotations

import datetime


class Student:

    def __init__(
        self,
        first_name: str,
        last_name: str,
        contact_info: str = "",
        special_needs: list[str] | None = None,
        groups: list[str] | None = None,
        created_at: datetime.datetime | None = None,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id
        # names use setter methods for required-field validation
        self.first_name = first_name
        self.last_name = last_name
        self._contact_info = contact_info or ""
        self._special_needs: list[str] = list(special_needs or [])
        self._groups: list[str] = list(groups or [])
        self._created_at = created_at or datetime.datetime.now()

    # === properties ===

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, first_name: str) -> None:
        self._first_name = Student.validate_name_input(first_name, "First name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, last_name: str) -> None:
        self._last_name = Student.validate_name_input(last_name, "Last name")

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def initials(self) -> str:
        return f"{self._first_name[:1]}{self._last_name[:1]}".upper()

    @property
    def contact_info(self) -> str:
        return self._contact_info

    @contact_info.setter
    def contact_info(self, contact_info: str) -> None:
        self._contact_info = (contact_info or "").strip()

    @property
    def special_needs(self) -> list[str]:
        return list(self._special_needs)

    @special_needs.setter
    def special_needs(self, special_needs: list[str]) -> None:
        self._special_needs = [tag.strip() for tag in special_needs if tag.strip()]

    @property
    def has_special_needs(self) -> bool:
        return bool(self._special_needs)

    @property
    def groups(self) -> list[str]:
        return list(self._groups)

    @groups.setter
    def groups(self, groups: list[str]) -> None:
        self._groups = list(dict.fromkeys(groups))

    @property
    def created_at(self) -> datetime.datetime:
        return self._created_at

    # === class group membership ===

    def belongs_to(self, class_group_id: str) -> bool:
        return class_group_id in self._groups

    def join_group(self, class_group_id: str) -> None:
        if class_group_id not in self._groups:
            self._groups.append(class_group_id)

    def leave_group(self, class_group_id: str) -> None:
        self._groups = [g for g in self._groups if g != class_group_id]

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "contact_info": self._contact_info,
            "special_needs": list(self._special_needs),
            "groups": list(self._groups),
            "created_at": self._created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        created_at_str = data.get("created_at")

        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            first_name=data["first_name"],
            last_name=data["last_name"],
            contact_info=data.get("contact_info", ""),
            special_needs=data.get("special_needs", []),
            groups=data.get("groups", []),
            created_at=(
                datetime.datetime.fromisoformat(created_at_str)
                if created_at_str
                else None
            ),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._first_name}, {self._last_name}, {self._groups})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self.full_name}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str, field_label: str = "Name") -> str:
        """
        Validates and normalizes a required name field.

        Args:
            name: The raw input string.
            field_label: Label used in the error message.

        Returns:
            The input with surrounding whitespace stripped.

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the input is blank.
        """
        if not isinstance(name, str):
            raise TypeError(f"Invalid input. {field_label} must be text.")

        name = name.strip()

        if not name:
            raise ValueError(f"Invalid input. {field_label} is required.")

        return name
