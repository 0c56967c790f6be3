"""
Session persistence.

Serializes the tracked files and options into durable key-value storage
so work survives reloads, and reads the snapshot back on startup.

Persistence is best-effort: storage failures are logged and never
propagate. A stored snapshot that cannot be parsed or fails validation is
treated exactly like an absent one.

Stored layout (JSON):
    {"version": "1.0.0", "fileEntries": [...], "options": {...}, "timestamp": 1700000000000}
"""

import json
import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from mtgconverter.config import settings
from mtgconverter.db.storage import KeyValueStorage
from mtgconverter.models.errors import InvalidOptionError, StorageError
from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import OPTION_FIELDS, ConversionOptions
from mtgconverter.models.session import SessionData

logger = logging.getLogger(__name__)

# Key used for the file list by sessions written before it was renamed
LEGACY_FILE_LIST_KEY = "fileDataList"


def _now_ms() -> int:
    return int(time.time() * 1000)


def migrate(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Bring a stored snapshot up to the current shape.

    - Renames the legacy file list key
    - Strips option fields the current schema no longer recognizes
      (e.g. the deprecated `addToList` flag)

    Never fails on well-formed but outdated input. Anything it does not
    recognize is passed through for validation to reject.
    """
    data = dict(raw)

    if "fileEntries" not in data and LEGACY_FILE_LIST_KEY in data:
        data["fileEntries"] = data.pop(LEGACY_FILE_LIST_KEY)

    options = data.get("options")
    if isinstance(options, dict):
        stripped = sorted(set(options) - OPTION_FIELDS)
        if stripped:
            logger.info("Dropping deprecated session options: %s", ", ".join(stripped))
        data["options"] = {key: value for key, value in options.items() if key in OPTION_FIELDS}

    return data


def _has_required_shape(data: Mapping[str, Any]) -> bool:
    timestamp = data.get("timestamp")
    return (
        isinstance(data.get("version"), str)
        and bool(data["version"])
        and isinstance(data.get("fileEntries"), list)
        and isinstance(data.get("options"), dict)
        and isinstance(timestamp, int | float)
        and not isinstance(timestamp, bool)
    )


def _to_session(data: Mapping[str, Any]) -> SessionData:
    """
    Build SessionData from a migrated snapshot.

    Raises:
        ValueError: If an entry is malformed or ids repeat
        OverflowError: If the timestamp is not finite
        InvalidOptionError: If an option value is outside the accepted set
    """
    if not all(isinstance(entry, dict) for entry in data["fileEntries"]):
        raise ValueError("Stored session contains a non-object file entry")

    entries = tuple(FileEntry.from_dict(entry) for entry in data["fileEntries"])
    ids = [entry.id for entry in entries]
    if len(ids) != len(set(ids)):
        raise ValueError("Stored session contains duplicate file ids")

    return SessionData(
        version=data["version"],
        file_entries=entries,
        options=ConversionOptions.from_dict(data["options"]),
        timestamp=int(data["timestamp"]),
    )


class SessionStore:
    """Reads and writes the session snapshot under one fixed storage key."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = settings.session_storage_key,
        version: str = settings.session_schema_version,
    ) -> None:
        self._storage = storage
        self._key = key
        self._version = version

    @property
    def key(self) -> str:
        return self._key

    @property
    def version(self) -> str:
        return self._version

    async def save(self, file_entries: Iterable[FileEntry], options: ConversionOptions) -> None:
        """Persist a snapshot. Failures are logged, never raised."""
        snapshot = SessionData(
            version=self._version,
            file_entries=tuple(file_entries),
            options=options,
            timestamp=_now_ms(),
        )
        try:
            await self._storage.set(self._key, json.dumps(snapshot.to_dict()))
        except StorageError as e:
            logger.error("Error saving to storage: %s", e)
            return

        logger.debug("Saved session with %d files", len(snapshot.file_entries))

    async def load(self) -> SessionData | None:
        """
        Read the stored snapshot.

        Returns:
            The migrated session, or None if nothing usable is stored
        """
        try:
            stored = await self._storage.get(self._key)
        except StorageError as e:
            logger.error("Error reading from storage: %s", e)
            return None

        if not stored:
            return None

        try:
            raw = json.loads(stored)
        except (ValueError, RecursionError) as e:
            logger.error("Stored session is not valid JSON: %s", e)
            return None

        if not isinstance(raw, dict):
            logger.warning("Stored session is not an object; ignoring it")
            return None

        data = migrate(raw)
        if not _has_required_shape(data):
            logger.warning("Stored session is missing required fields; ignoring it")
            return None

        try:
            return _to_session(data)
        except (ValueError, OverflowError, InvalidOptionError) as e:
            logger.warning("Stored session failed validation; ignoring it: %s", e)
            return None

    async def has_stored_session(self) -> bool:
        return await self.load() is not None

    async def is_reachable(self) -> bool:
        """Check that the backend answers a read of the session key."""
        try:
            await self._storage.get(self._key)
        except StorageError as e:
            logger.warning("Session storage unreachable: %s", e)
            return False
        return True

    async def clear(self) -> None:
        """Remove the stored snapshot. Failures are logged, never raised."""
        try:
            await self._storage.remove(self._key)
        except StorageError as e:
            logger.error("Error clearing storage: %s", e)
