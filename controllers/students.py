# controllers/students.py

"""
The Students page: roster search, student CRUD, and the per-student record tabs.

A selected student exposes three tabs:
    - interventions, newest first, with add and a pending/resolved toggle
    - grades, newest first, with add/edit/delete and an average that leaves out final grades
    - follow-up notes, newest first, with add and delete

Deleting a student does not cascade: their grades, interventions and follow-up notes stay in
storage.
"""

from __future__ import annotations

from controllers.base import PageController
from core.response import Response
from models.class_group import ClassGroup
from models.follow_up_note import FollowUpNote
from models.grade import Grade, GradeType, average_grade
from models.intervention import Intervention, InterventionType
from models.student import Student


class StudentsController(PageController):

    def __init__(self, storage):
        super().__init__(storage)
        self._students: list[Student] = []
        self._classes: list[ClassGroup] = []
        self._interventions: list[Intervention] = []
        self._grades: list[Grade] = []
        self._follow_ups: list[FollowUpNote] = []
        self._search_query = ""
        self._selected_student_id: str | None = None

    def refresh(self) -> None:
        self._students = self._load_records("students", Student.from_dict)
        self._classes = self._load_records("classes", ClassGroup.from_dict)
        self._interventions = self._load_records(
            "interventions", Intervention.from_dict
        )
        self._grades = self._load_records("grades", Grade.from_dict)
        self._follow_ups = self._load_records("follow_ups", FollowUpNote.from_dict)

        # the selected student may have been deleted elsewhere
        if self.selected_student is None:
            self._selected_student_id = None

    # === roster ===

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    @property
    def classes(self) -> list[ClassGroup]:
        return list(self._classes)

    @property
    def search_query(self) -> str:
        return self._search_query

    def search(self, query: str) -> None:
        self._search_query = (query or "").strip()

    @property
    def filtered_students(self) -> list[Student]:
        """Students whose full name or any class group name contains the search query."""
        query = self._search_query.lower()

        if not query:
            return self.students

        return [
            s
            for s in self._students
            if query in s.full_name.lower()
            or any(query in name.lower() for name in self.group_names(s))
        ]

    def class_name(self, class_group_id: str) -> str | None:
        for class_group in self._classes:
            if class_group.id == class_group_id:
                return class_group.name
        return None

    def group_names(self, student: Student) -> list[str]:
        names = (self.class_name(group_id) for group_id in student.groups)
        return [name for name in names if name is not None]

    def find_student(self, student_id: str) -> Student | None:
        return next((s for s in self._students if s.id == student_id), None)

    # === selection ===

    @property
    def selected_student(self) -> Student | None:
        if self._selected_student_id is None:
            return None
        return self.find_student(self._selected_student_id)

    def select_student(self, student_id: str) -> Response:
        student = self.find_student(student_id)

        if student is None:
            return self._not_found("student", student_id)

        self._selected_student_id = student_id

        return Response.succeed(data={"student": student})

    def clear_selection(self) -> None:
        self._selected_student_id = None

    # === student crud ===

    def add_student(
        self,
        first_name: str,
        last_name: str,
        groups: list[str] | None = None,
        contact_info: str = "",
        special_needs: list[str] | None = None,
    ) -> Response:
        def action():
            student = Student(
                first_name=first_name,
                last_name=last_name,
                contact_info=contact_info,
                special_needs=special_needs,
                groups=groups,
            )
            return self._storage.create("students", student.to_dict())

        return self._perform(action, detail="Student added.")

    def update_student(self, student_id: str, **changes) -> Response:
        """
        Edits one or more student fields.

        Accepted keyword arguments: first_name, last_name, contact_info, special_needs, groups.
        The merged student is rebuilt before saving, so blank names are rejected.
        """
        student = self.find_student(student_id)

        if student is None:
            return self._not_found("student", student_id)

        def action():
            merged = Student.from_dict({**student.to_dict(), **changes})
            partial = {
                k: v for k, v in merged.to_dict().items() if k in changes
            }
            self._storage.update("students", student_id, partial)

        return self._perform(action, detail="Student updated.")

    def delete_student(self, student_id: str) -> Response:
        if self.find_student(student_id) is None:
            return self._not_found("student", student_id)

        def action():
            self._storage.delete("students", student_id)
            if self._selected_student_id == student_id:
                self._selected_student_id = None

        return self._perform(action, detail="Student deleted.")

    # === interventions tab ===

    def interventions_for(self, student_id: str) -> list[Intervention]:
        records = [i for i in self._interventions if i.student_id == student_id]
        return sorted(records, key=lambda i: i.date, reverse=True)

    def add_intervention(
        self,
        student_id: str,
        type: InterventionType | str,
        description: str,
    ) -> Response:
        student = self.find_student(student_id)

        if student is None:
            return self._not_found("student", student_id)

        def action():
            intervention = Intervention(
                student_id=student_id,
                student_name=student.full_name,
                type=InterventionType(type),
                description=description,
            )
            return self._storage.create("interventions", intervention.to_dict())

        return self._perform(action, detail="Intervention recorded.")

    def toggle_intervention_status(self, intervention_id: str) -> Response:
        intervention = next(
            (i for i in self._interventions if i.id == intervention_id), None
        )

        if intervention is None:
            return self._not_found("intervention", intervention_id)

        new_status = intervention.toggled_status()

        def action():
            self._storage.update(
                "interventions", intervention_id, {"status": new_status.value}
            )
            return new_status

        return self._perform(action, detail=f"Intervention marked {new_status.value}.")

    # === grades tab ===

    def grades_for(self, student_id: str) -> list[Grade]:
        records = [g for g in self._grades if g.student_id == student_id]
        return sorted(records, key=lambda g: g.date, reverse=True)

    def student_average(self, student_id: str) -> float | None:
        return average_grade(self.grades_for(student_id))

    def add_grade(
        self,
        student_id: str,
        class_group_id: str,
        title: str,
        grade: float | str,
        type: GradeType | str = GradeType.EXAM,
    ) -> Response:
        if self.find_student(student_id) is None:
            return self._not_found("student", student_id)

        def action():
            if not class_group_id:
                raise ValueError("A class group is required.")

            new_grade = Grade(
                student_id=student_id,
                class_group_id=class_group_id,
                title=title,
                grade=grade,
                type=GradeType(type),
            )
            return self._storage.create("grades", new_grade.to_dict())

        return self._perform(action, detail="Grade added.")

    def update_grade(
        self,
        grade_id: str,
        title: str | None = None,
        grade: float | str | None = None,
        type: GradeType | str | None = None,
    ) -> Response:
        existing = next((g for g in self._grades if g.id == grade_id), None)

        if existing is None:
            return self._not_found("grade", grade_id)

        def action():
            draft = Grade.from_dict(existing.to_dict())
            partial = {}

            if title is not None:
                draft.title = title
                partial["title"] = draft.title
            if grade is not None:
                draft.grade = grade
                partial["grade"] = draft.grade
            if type is not None:
                draft.type = type
                partial["type"] = draft.type.value

            self._storage.update("grades", grade_id, partial)

        return self._perform(action, detail="Grade updated.")

    def delete_grade(self, grade_id: str) -> Response:
        return self._perform(
            lambda: self._storage.delete("grades", grade_id),
            detail="Grade deleted.",
        )

    # === follow-up tab ===

    def follow_ups_for(self, student_id: str) -> list[FollowUpNote]:
        records = [f for f in self._follow_ups if f.student_id == student_id]
        return sorted(records, key=lambda f: f.date, reverse=True)

    def add_follow_up(self, student_id: str, title: str, content: str) -> Response:
        if self.find_student(student_id) is None:
            return self._not_found("student", student_id)

        def action():
            note = FollowUpNote(student_id=student_id, title=title, content=content)
            return self._storage.create("follow_ups", note.to_dict())

        return self._perform(action, detail="Follow-up note added.")

    def delete_follow_up(self, follow_up_id: str) -> Response:
        return self._perform(
            lambda: self._storage.delete("follow_ups", follow_up_id),
            detail="Follow-up note deleted.",
        )
