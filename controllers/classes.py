# controllers/classes.py

"""
The Classes page: class groups, their rosters, and class averages.

A student is on a class's roster when the class id appears in the student's `groups`. The class
average covers every non-final grade recorded for the class, rounded to one decimal.
"""

from __future__ import annotations

from controllers.base import PageController
from core.response import Response
from models.class_group import ClassGroup
from models.grade import Grade, average_grade
from models.student import Student


class ClassesController(PageController):

    def __init__(self, storage):
        super().__init__(storage)
        self._classes: list[ClassGroup] = []
        self._students: list[Student] = []
        self._grades: list[Grade] = []
        self._selected_class_id: str | None = None

    def refresh(self) -> None:
        self._classes = self._load_records("classes", ClassGroup.from_dict)
        self._students = self._load_records("students", Student.from_dict)
        self._grades = self._load_records("grades", Grade.from_dict)

        if self.selected_class is None:
            self._selected_class_id = None

    # === view data ===

    @property
    def classes(self) -> list[ClassGroup]:
        return sorted(self._classes, key=lambda c: c.name.lower())

    def find_class(self, class_group_id: str) -> ClassGroup | None:
        return next((c for c in self._classes if c.id == class_group_id), None)

    def roster(self, class_group_id: str) -> list[Student]:
        members = [s for s in self._students if s.belongs_to(class_group_id)]
        return sorted(members, key=lambda s: (s.last_name.lower(), s.first_name.lower()))

    def roster_count(self, class_group_id: str) -> int:
        return len(self.roster(class_group_id))

    def class_average(self, class_group_id: str) -> float | None:
        return average_grade(
            g for g in self._grades if g.class_group_id == class_group_id
        )

    def students_not_in(self, class_group_id: str) -> list[Student]:
        return [s for s in self._students if not s.belongs_to(class_group_id)]

    # === selection ===

    @property
    def selected_class(self) -> ClassGroup | None:
        if self._selected_class_id is None:
            return None
        return self.find_class(self._selected_class_id)

    def select_class(self, class_group_id: str) -> Response:
        class_group = self.find_class(class_group_id)

        if class_group is None:
            return self._not_found("class", class_group_id)

        self._selected_class_id = class_group_id

        return Response.succeed(data={"class_group": class_group})

    def clear_selection(self) -> None:
        self._selected_class_id = None

    # === actions ===

    def add_class(self, name: str, subject: str = "") -> Response:
        def action():
            class_group = ClassGroup(name=name, subject=subject)
            return self._storage.create("classes", class_group.to_dict())

        return self._perform(action, detail="Class added.")

    def delete_class(self, class_group_id: str) -> Response:
        if self.find_class(class_group_id) is None:
            return self._not_found("class", class_group_id)

        def action():
            self._storage.delete("classes", class_group_id)
            if self._selected_class_id == class_group_id:
                self._selected_class_id = None

        return self._perform(action, detail="Class deleted.")

    def add_student_to_class(
        self,
        class_group_id: str,
        first_name: str,
        last_name: str,
        contact_info: str = "",
        special_needs: list[str] | None = None,
    ) -> Response:
        """Creates a new student whose only group is `class_group_id`."""
        if self.find_class(class_group_id) is None:
            return self._not_found("class", class_group_id)

        def action():
            student = Student(
                first_name=first_name,
                last_name=last_name,
                contact_info=contact_info,
                special_needs=special_needs,
                groups=[class_group_id],
            )
            return self._storage.create("students", student.to_dict())

        return self._perform(action, detail="Student added to class.")

    def enroll_student(self, class_group_id: str, student_id: str) -> Response:
        """Adds an existing student to `class_group_id`, keeping their other groups."""
        if self.find_class(class_group_id) is None:
            return self._not_found("class", class_group_id)

        student = next((s for s in self._students if s.id == student_id), None)

        if student is None:
            return self._not_found("student", student_id)

        def action():
            # the cached student changes only through the refresh
            groups = student.groups
            if class_group_id not in groups:
                groups = groups + [class_group_id]
            self._storage.update("students", student_id, {"groups": groups})

        return self._perform(action, detail="Student enrolled.")
