# controllers/base.py

"""
Shared plumbing for page controllers.

A page controller owns the view state of one page. It loads its collections through the
`StorageAdapter` on `refresh()`, exposes derived view data as properties, and performs user
actions as storage calls followed by a full refresh. Every action returns a `Response`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from core.response import ErrorCode, Response
from models.types import RecordType
from storage.adapter import StorageAdapter

logger = logging.getLogger(__name__)


class PageController(ABC):

    def __init__(self, storage: StorageAdapter):
        self._storage = storage

    @property
    def storage(self) -> StorageAdapter:
        return self._storage

    @property
    def status(self) -> str:
        return self._storage.status

    @abstractmethod
    def refresh(self) -> None:
        """Refetches every collection the page shows."""

    # === helpers ===

    def _load_records(
        self,
        collection: str,
        from_dict_fn: Callable[[dict[str, Any]], RecordType],
    ) -> list[RecordType]:
        """
        Lists a collection and deserializes each record.

        Records that fail to deserialize are logged and skipped so one bad document cannot keep
        a page from rendering.
        """
        records = []

        for record_dict in self._storage.list(collection):
            try:
                records.append(from_dict_fn(record_dict))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(
                    "Skipping malformed %s record %s: %s",
                    collection,
                    record_dict.get("id"),
                    e,
                )

        return records

    def _perform(
        self,
        action: Callable[[], Any],
        detail: str | None = None,
        refresh: bool = True,
    ) -> Response:
        """
        Runs a storage action and wraps the outcome in a `Response`.

        Args:
            action: A zero-argument callable that builds models and issues the storage calls.
            detail: Human-readable confirmation used on success.
            refresh: Whether to refetch the page after a successful action.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the action and the refetch completed.
                - detail (str | None): The confirmation or a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if ValueError raised.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if TypeError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None):
                    - On success, "record" holds whatever the action returned, if anything.
        """
        try:
            result = action()

            if refresh:
                self.refresh()

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except Exception as e:
            logger.exception("%s action failed", type(self).__name__)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                detail=detail,
                data={"record": result} if result is not None else None,
            )

    @staticmethod
    def _not_found(record_name: str, id: str | None) -> Response:
        return Response.fail(
            detail=f"No matching {record_name} could be found: {id}",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._storage.status})"
