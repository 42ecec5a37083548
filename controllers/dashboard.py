# controllers/dashboard.py

from __future__ import annotations

from controllers.base import PageController
from models.intervention import Intervention
from models.quick_note import QuickNote
from models.student import Student

RECENT_PENDING_LIMIT = 5


class DashboardController(PageController):
    """Read-only summary: headline counts and the most recent pending interventions."""

    def __init__(self, storage):
        super().__init__(storage)
        self._students: list[Student] = []
        self._interventions: list[Intervention] = []
        self._notes: list[QuickNote] = []

    def refresh(self) -> None:
        self._students = self._load_records("students", Student.from_dict)
        self._interventions = self._load_records(
            "interventions", Intervention.from_dict
        )
        self._notes = self._load_records("quick_notes", QuickNote.from_dict)

    # === view data ===

    @property
    def stats(self) -> dict[str, int]:
        return {
            "students": len(self._students),
            "pending": sum(1 for i in self._interventions if i.is_pending),
            "notes": sum(1 for n in self._notes if not n.is_archived),
        }

    @property
    def recent_pending(self) -> list[Intervention]:
        pending = [i for i in self._interventions if i.is_pending]
        pending.sort(key=lambda i: i.date, reverse=True)

        return pending[:RECENT_PENDING_LIMIT]
