# storage/remote_store.py

"""
The remote backend: one MongoDB collection per record collection, filtered on `owner_id`.

Documents keep their MongoDB `_id`; it is exposed to the rest of the program as a string `id`.
List failures are logged and yield an empty list so a page can still render. Write failures
propagate to the calling controller.
"""

from __future__ import annotations

import logging

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from core.config import OWNER_ID, RemoteConfig
from storage.backend import StorageBackend

logger = logging.getLogger(__name__)


class RemoteStore(StorageBackend):
    status = "connected"

    def __init__(self, database: Database):
        self._db = database

    @classmethod
    def connect(cls, config: RemoteConfig) -> RemoteStore:
        client = MongoClient(config.uri)
        return cls(client[config.database])

    # === reads ===

    def list(self, collection: str) -> list[dict]:
        try:
            documents = self._db[collection].find({"owner_id": OWNER_ID})
            return [self._to_record(doc) for doc in documents]

        except PyMongoError:
            logger.exception("Failed to list collection %s", collection)
            return []

    # === writes ===

    def create(self, collection: str, record: dict) -> dict:
        # insert_one adds _id to the dict it is given
        result = self._db[collection].insert_one(dict(record))

        return {"id": str(result.inserted_id), **record}

    def update(self, collection: str, id: str, partial: dict) -> None:
        self._db[collection].update_one({"_id": self._to_object_id(id)}, {"$set": partial})

    def delete(self, collection: str, id: str) -> None:
        self._db[collection].delete_one({"_id": self._to_object_id(id)})

    # === helpers ===

    @staticmethod
    def _to_record(document: dict) -> dict:
        record = dict(document)
        record["id"] = str(record.pop("_id"))
        return record

    @staticmethod
    def _to_object_id(id: str) -> ObjectId | str:
        return ObjectId(id) if ObjectId.is_valid(id) else id

    def __repr__(self) -> str:
        return f"RemoteStore({self._db.name})"
