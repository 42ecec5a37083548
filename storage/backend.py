# storage/backend.py

from __future__ import annotations

from abc import ABC, abstractmethod

# every named collection a page reads or writes
COLLECTION_NAMES = (
    "students",
    "classes",
    "grades",
    "interventions",
    "follow_ups",
    "resources",
    "quick_notes",
    "events",
)


class StorageBackend(ABC):
    """
    A document store holding one list of plain-dict records per named collection.

    Records handed to `create()` already carry `owner_id`; backends assign the `id`.
    """

    status: str = ""

    @abstractmethod
    def list(self, collection: str) -> list[dict]:
        """Returns the session owner's records in `collection`."""

    @abstractmethod
    def create(self, collection: str, record: dict) -> dict:
        """Stores `record` and returns it with its new `id`."""

    @abstractmethod
    def update(self, collection: str, id: str, partial: dict) -> None:
        """Shallow-merges `partial` into the record with `id`."""

    @abstractmethod
    def delete(self, collection: str, id: str) -> None:
        """Removes the record with `id`."""
