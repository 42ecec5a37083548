# controllers/settings.py

"""
The Settings page: backend status and the saved remote database settings.

Saving or clearing the settings file does not swap the live backend. It sets `reload_requested`,
and the navigation shell re-opens storage before showing the next page.
"""

from __future__ import annotations

import logging

from controllers.base import PageController
from core.config import (
    RemoteConfig,
    clear_remote_config,
    load_saved_remote_config,
    save_remote_config,
)
from core.response import ErrorCode, Response

logger = logging.getLogger(__name__)


class SettingsController(PageController):

    def __init__(self, storage, data_dir: str | None = None):
        super().__init__(storage)
        self._data_dir = data_dir
        self._saved_config: RemoteConfig | None = None
        self._reload_requested = False

    def refresh(self) -> None:
        self._saved_config = load_saved_remote_config(self._data_dir)

    @property
    def saved_config(self) -> RemoteConfig | None:
        return self._saved_config

    @property
    def reload_requested(self) -> bool:
        return self._reload_requested

    def save_config(self, uri: str, database: str = "") -> Response:
        config = RemoteConfig(uri=uri, database=database)

        if not config.uri:
            return Response.fail(
                detail="Missing required field: the connection URI is required.",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        def action():
            path = save_remote_config(config, self._data_dir)
            self._reload_requested = True
            return path

        return self._perform(action, detail="Remote settings saved.")

    def clear_config(self) -> Response:
        def action():
            if clear_remote_config(self._data_dir):
                self._reload_requested = True
            else:
                logger.info("No saved remote settings to clear")

        return self._perform(action, detail="Remote settings cleared.")
