# controllers/notes.py

from __future__ import annotations

from controllers.base import PageController
from core.response import Response
from models.quick_note import DEFAULT_NOTE_COLOR, NOTE_COLORS, QuickNote


class NotesController(PageController):
    """The sticky-note board. Archived notes never come back to the board."""

    def __init__(self, storage):
        super().__init__(storage)
        self._notes: list[QuickNote] = []

    def refresh(self) -> None:
        notes = self._load_records("quick_notes", QuickNote.from_dict)
        self._notes = sorted(
            (n for n in notes if not n.is_archived),
            key=lambda n: n.created_at,
            reverse=True,
        )

    @property
    def notes(self) -> list[QuickNote]:
        return list(self._notes)

    def create_note(self, content: str, color: str = DEFAULT_NOTE_COLOR) -> Response:
        def action():
            if color not in NOTE_COLORS.values():
                raise ValueError(f"Unknown note color: {color}")

            note = QuickNote(content=content, color=color)
            return self._storage.create("quick_notes", note.to_dict())

        return self._perform(action, detail="Note saved.")

    def archive_note(self, note_id: str) -> Response:
        return self._perform(
            lambda: self._storage.update("quick_notes", note_id, {"is_archived": True}),
            detail="Note archived.",
        )
