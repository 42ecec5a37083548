# core/config.py

"""
Application configuration for TeacherMate.

Holds the fixed session identity, the storage keys used for the local mock store and the
saved remote settings, and the compiled-in remote defaults.

Remote defaults come from the environment (optionally via a `.env` file loaded with
python-dotenv). A settings file written from the Settings menu takes precedence over them.
A config whose URI is blank or still the placeholder is treated as "not configured", which
makes the storage layer fall back to the local mock store.
"""

from __future__ import annotations

import json
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

APP_NAME = "TeacherMate"

# stands in for real multi-user auth, every record is written and filtered against it
OWNER_ID = "profe_master_dev"

MOCK_STORAGE_KEY = "teacher_mate_db"
REMOTE_CONFIG_KEY = "teacher_mate_remote_config"

PLACEHOLDER_URI = "YOUR_MONGODB_URI"
DEFAULT_DATABASE = "teachermate"


def get_data_dir() -> str:
    data_dir = os.getenv("TEACHERMATE_DATA_DIR") or os.path.join(
        os.path.expanduser("~"), ".teachermate"
    )
    return os.path.abspath(os.path.expanduser(data_dir))


def storage_path(key: str, data_dir: str | None = None) -> str:
    return os.path.join(data_dir or get_data_dir(), f"{key}.json")


class RemoteConfig:
    """
    Connection settings for the remote document database.

    Attributes:
        uri (str): The MongoDB connection string, credentials included.
        database (str): The database that holds the named collections.
    """

    def __init__(self, uri: str = "", database: str = DEFAULT_DATABASE):
        self._uri = uri.strip() if uri else ""
        self._database = database.strip() if database else DEFAULT_DATABASE

    # === properties ===

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def database(self) -> str:
        return self._database

    @property
    def is_configured(self) -> bool:
        return bool(self._uri) and self._uri != PLACEHOLDER_URI

    @property
    def masked_uri(self) -> str:
        if not self._uri:
            return ""

        # hide credentials between the scheme and the host
        scheme, sep, rest = self._uri.partition("://")
        if sep and "@" in rest:
            return f"{scheme}://***@{rest.split('@', 1)[1]}"

        return self._uri

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "uri": self._uri,
            "database": self._database,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RemoteConfig:
        return cls(
            uri=data.get("uri", ""),
            database=data.get("database", DEFAULT_DATABASE),
        )

    @classmethod
    def from_env(cls) -> RemoteConfig:
        return cls(
            uri=os.getenv("TEACHERMATE_MONGODB_URI", PLACEHOLDER_URI),
            database=os.getenv("TEACHERMATE_MONGODB_DATABASE", DEFAULT_DATABASE),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"RemoteConfig({self.masked_uri}, {self._database})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()


# === saved settings ===


def load_saved_remote_config(data_dir: str | None = None) -> RemoteConfig | None:
    """
    Reads the remote settings saved from the Settings menu.

    Returns:
        The saved `RemoteConfig`, or None if no settings file exists or it cannot be parsed.
    """
    path = storage_path(REMOTE_CONFIG_KEY, data_dir)

    try:
        with open(path, "r") as f:
            data = json.load(f)

    except FileNotFoundError:
        return None

    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable remote settings at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring remote settings at %s: expected an object", path)
        return None

    return RemoteConfig.from_dict(data)


def save_remote_config(config: RemoteConfig, data_dir: str | None = None) -> str:
    path = storage_path(REMOTE_CONFIG_KEY, data_dir)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2, sort_keys=True)

    logger.info("Saved remote settings for database %s", config.database)
    return path


def clear_remote_config(data_dir: str | None = None) -> bool:
    path = storage_path(REMOTE_CONFIG_KEY, data_dir)

    try:
        os.remove(path)

    except FileNotFoundError:
        return False

    logger.info("Cleared remote settings at %s", path)
    return True


def resolve_active_remote_config(data_dir: str | None = None) -> RemoteConfig | None:
    """
    Picks the remote config the storage layer should connect with.

    The saved settings file wins over the environment defaults. Returns None when neither
    holds a usable (non-placeholder) URI.
    """
    saved = load_saved_remote_config(data_dir)

    if saved is not None:
        return saved if saved.is_configured else None

    defaults = RemoteConfig.from_env()

    return defaults if defaults.is_configured else None
