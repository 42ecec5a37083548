# storage/adapter.py

"""
The one storage interface every page controller talks to.

`StorageAdapter` wraps whichever backend was chosen at session start and enforces ownership:
records are stamped with the fixed session identity on create, and callers can never set or
overwrite `id` or `owner_id` through a create or an update.

`open_storage()` picks the backend once. A usable remote config (saved settings first, then the
environment defaults) connects MongoDB; anything else, including a client that fails to build,
falls back to the local mock store.
"""

from __future__ import annotations

import logging

from core.config import OWNER_ID, get_data_dir, resolve_active_remote_config
from storage.backend import StorageBackend
from storage.local_store import LocalStore
from storage.remote_store import RemoteStore

logger = logging.getLogger(__name__)

_PROTECTED_FIELDS = ("id", "owner_id")


class StorageAdapter:

    def __init__(self, backend: StorageBackend):
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def status(self) -> str:
        """Either "connected" (remote database) or "mock" (local store)."""
        return self._backend.status

    @property
    def is_connected(self) -> bool:
        return self.status == "connected"

    # === operations ===

    def list(self, collection: str) -> list[dict]:
        return self._backend.list(collection)

    def create(self, collection: str, record: dict) -> dict:
        item = self._strip_protected(record)
        item["owner_id"] = OWNER_ID

        created = self._backend.create(collection, item)
        logger.debug("Created %s record %s", collection, created.get("id"))

        return created

    def update(self, collection: str, id: str, partial: dict) -> None:
        changes = self._strip_protected(partial)

        if not changes:
            return

        self._backend.update(collection, id, changes)
        logger.debug("Updated %s record %s: %s", collection, id, sorted(changes))

    def delete(self, collection: str, id: str) -> None:
        self._backend.delete(collection, id)
        logger.debug("Deleted %s record %s", collection, id)

    # === helpers ===

    @staticmethod
    def _strip_protected(record: dict) -> dict:
        return {k: v for k, v in record.items() if k not in _PROTECTED_FIELDS}

    def __repr__(self) -> str:
        return f"StorageAdapter({self._backend!r})"


def open_storage(data_dir: str | None = None) -> StorageAdapter:
    data_dir = data_dir or get_data_dir()
    config = resolve_active_remote_config(data_dir)

    if config is not None:
        try:
            backend = RemoteStore.connect(config)

        except Exception:
            logger.exception(
                "Could not create the MongoDB client, falling back to the local store"
            )

        else:
            logger.info("Connected to remote database %s", config.database)
            return StorageAdapter(backend)

    backend = LocalStore(data_dir)
    logger.info("Using local store at %s", backend.path)

    return StorageAdapter(backend)
