# storage/local_store.py

"""
The local mock store: every collection kept in one JSON blob on disk.

The blob lives at `<data_dir>/teacher_mate_db.json`. If it does not exist yet, it is created and
seeded with fixture data on first access. Every operation re-reads the blob and every mutation
writes the whole blob back, so two open sessions see each other's writes on the next call.

Updates and deletes that name a missing collection or id do nothing.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.config import MOCK_STORAGE_KEY, OWNER_ID, storage_path
from core.utils import generate_mock_id
from storage.backend import StorageBackend
from storage.fixtures import build_seed_data

logger = logging.getLogger(__name__)


class LocalStore(StorageBackend):
    status = "mock"

    def __init__(self, data_dir: str, seed: bool = True):
        self._path = storage_path(MOCK_STORAGE_KEY, data_dir)
        self._seed = seed

    @property
    def path(self) -> str:
        return self._path

    # === reads ===

    def list(self, collection: str) -> list[dict]:
        db = self._read_db()

        return [
            dict(record)
            for record in db.get(collection, [])
            if record.get("owner_id") == OWNER_ID
        ]

    # === writes ===

    def create(self, collection: str, record: dict) -> dict:
        db = self._read_db()

        new_record = {"id": generate_mock_id(), **record}
        db.setdefault(collection, []).append(new_record)
        self._write_db(db)

        return dict(new_record)

    def update(self, collection: str, id: str, partial: dict) -> None:
        db = self._read_db()

        if collection not in db:
            return

        for index, record in enumerate(db[collection]):
            if record.get("id") == id:
                db[collection][index] = {**record, **partial}
                self._write_db(db)
                return

    def delete(self, collection: str, id: str) -> None:
        db = self._read_db()

        if collection not in db:
            return

        db[collection] = [record for record in db[collection] if record.get("id") != id]
        self._write_db(db)

    # === blob i/o ===

    def _read_db(self) -> dict[str, Any]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)

        except FileNotFoundError:
            initial = build_seed_data(OWNER_ID) if self._seed else {}
            logger.info("Creating local store at %s", self._path)
            self._write_db(initial)
            return initial

    def _write_db(self, db: dict[str, Any]) -> None:
        os.makedirs(os.path.dirname(self._path), exist_ok=True)

        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(db, f, indent=2, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"LocalStore({self._path})"
