# core/drag_state.py

"""
State machine for the calendar's drag-and-drop interactions.

A `DragSession` tracks one drag gesture from pick-up to drop:

    IDLE -> DRAGGING -> OVER_TARGET -> DROPPED
                     +-------------> CANCELLED

Two payload kinds exist: a quick note picked from the unscheduled list, and a calendar event
picked from a day cell. Two target kinds exist: a day cell and the floating trash. The session
only decides whether a drop is meaningful; the caller performs the resulting storage calls.

Drop rules:
    - A note dropped on a day is accepted (it becomes an event on that day).
    - An event dropped on the trash is accepted (it opens the delete confirmation).
    - Every other pairing is ignored and the session ends as CANCELLED.
"""

from __future__ import annotations

from enum import Enum


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    OVER_TARGET = "over_target"
    DROPPED = "dropped"
    CANCELLED = "cancelled"


class PayloadKind(str, Enum):
    NOTE = "note"
    EVENT = "event"


class TargetKind(str, Enum):
    DAY = "day"
    TRASH = "trash"


_ACCEPTED_DROPS = {
    (PayloadKind.NOTE, TargetKind.DAY),
    (PayloadKind.EVENT, TargetKind.TRASH),
}


class DragSession:
    """
    A single, short-lived drag gesture.

    Notes:
        - A finished session (DROPPED or CANCELLED) can be reused by calling `start()` again.
        - No validation is performed on payload ids; the caller passes ids it just listed.
    """

    def __init__(self):
        self._state = DragState.IDLE
        self._payload_kind: PayloadKind | None = None
        self._payload_id: str | None = None
        self._target_kind: TargetKind | None = None
        self._target_value: object = None

    # === properties ===

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def payload_kind(self) -> PayloadKind | None:
        return self._payload_kind

    @property
    def payload_id(self) -> str | None:
        return self._payload_id

    @property
    def target_kind(self) -> TargetKind | None:
        return self._target_kind

    @property
    def target_value(self) -> object:
        return self._target_value

    @property
    def is_dragging(self) -> bool:
        return self._state in (DragState.DRAGGING, DragState.OVER_TARGET)

    @property
    def is_trash_active(self) -> bool:
        return (
            self._state is DragState.OVER_TARGET
            and self._target_kind is TargetKind.TRASH
        )

    # === transitions ===

    def start(self, payload_kind: PayloadKind, payload_id: str) -> None:
        if self.is_dragging:
            raise RuntimeError(f"A drag is already in progress: {self!r}")

        self._state = DragState.DRAGGING
        self._payload_kind = payload_kind
        self._payload_id = payload_id
        self._target_kind = None
        self._target_value = None

    def enter(self, target_kind: TargetKind, target_value: object = None) -> None:
        self._require_dragging()

        self._state = DragState.OVER_TARGET
        self._target_kind = target_kind
        self._target_value = target_value

    def leave(self) -> None:
        self._require_dragging()

        self._state = DragState.DRAGGING
        self._target_kind = None
        self._target_value = None

    def drop(self) -> bool:
        """
        Finishes the gesture over the current target.

        Returns:
            True if the payload/target pairing is accepted, False otherwise. Ignored drops end the
            session as CANCELLED.
        """
        self._require_dragging()

        if self._state is DragState.OVER_TARGET and (
            (self._payload_kind, self._target_kind) in _ACCEPTED_DROPS
        ):
            self._state = DragState.DROPPED
            return True

        self._state = DragState.CANCELLED
        return False

    def cancel(self) -> None:
        if self.is_dragging:
            self._state = DragState.CANCELLED

    def reset(self) -> None:
        self.__init__()

    # === helpers ===

    def _require_dragging(self) -> None:
        if not self.is_dragging:
            raise RuntimeError(f"No drag in progress: {self!r}")

    def __repr__(self) -> str:
        return f"DragSession({self._state.value}, {self._payload_kind}, {self._payload_id}, {self._target_kind})"
