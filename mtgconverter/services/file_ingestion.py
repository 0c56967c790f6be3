"""
File Ingestion Store.

=============================================================================
RESPONSIBILITY BOUNDARY
=============================================================================

This module owns the authoritative list of tracked files. It decides, for
every upload event, which candidates are new and which are already tracked,
and merges the new ones without duplication.

INVARIANTS:
- File ids are unique within the tracked list
- Ingestion is strictly additive: existing entries are never replaced
- An entry is inserted complete with its records, or not at all
- `processing` is False whenever no ingest call is in flight

Every mutation replaces the entry tuple in a single assignment, so readers
never observe a half-updated list.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence

from mtgconverter.models.errors import DecodeError, ReadError
from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.record import Record
from mtgconverter.models.upload import AlreadyTracked, NewUpload, UploadCandidate
from mtgconverter.parsers.liga_csv import decode_or_raise
from mtgconverter.services.file_identity import identify
from mtgconverter.services.options_reprocessor import collect_included_records

logger = logging.getLogger(__name__)

ChangeListener = Callable[[tuple[FileEntry, ...]], None]


class FileIngestionStore:
    """Tracked files, their records, inclusion flags and provenance."""

    def __init__(self) -> None:
        self._entries: tuple[FileEntry, ...] = ()
        self._in_flight = 0
        self._listeners: list[ChangeListener] = []

    # --- Read path ---

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        return self._entries

    @property
    def processing(self) -> bool:
        return self._in_flight > 0

    def get(self, file_id: str) -> FileEntry | None:
        for entry in self._entries:
            if entry.id == file_id:
                return entry
        return None

    def included_records(self) -> list[Record]:
        return collect_included_records(self._entries)

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback invoked with the new snapshot after each change."""
        self._listeners.append(listener)

    # --- Mutations ---

    async def ingest(self, candidates: Sequence[UploadCandidate]) -> list[FileEntry]:
        """
        Ingest a batch of upload candidates.

        Already-tracked candidates (restored references, or new uploads whose
        id is present) are skipped without being read. New candidates are
        read and decoded concurrently; a file that fails to read or decode is
        logged and omitted without blocking the others.

        Args:
            candidates: Upload event payload

        Returns:
            The entries newly added to the store, in candidate order
        """
        self._in_flight += 1
        try:
            pending = self._select_new(candidates)
            if not pending:
                return []

            results = await asyncio.gather(*(self._load(upload) for upload in pending))
            loaded = [entry for entry in results if entry is not None]

            # Re-check against the live list: another call may have added
            # the same file while this batch was reading
            existing_ids = {entry.id for entry in self._entries}
            added = [entry for entry in loaded if entry.id not in existing_ids]
            if added:
                self._commit(self._entries + tuple(added))

            logger.info(
                "Ingested %d of %d new files (%d failed)",
                len(added),
                len(pending),
                len(pending) - len(loaded),
            )
            return added
        finally:
            self._in_flight -= 1

    def toggle_included(self, file_id: str) -> None:
        """Flip the inclusion flag of one file. No-op if the id is not tracked."""
        if self.get(file_id) is None:
            return
        self._commit(
            tuple(entry.toggled() if entry.id == file_id else entry for entry in self._entries)
        )

    def remove(self, file_id: str) -> None:
        """Stop tracking one file. No-op if the id is not tracked."""
        if self.get(file_id) is None:
            return
        self._commit(tuple(entry for entry in self._entries if entry.id != file_id))

    def restore(self, entries: Iterable[FileEntry]) -> None:
        """Replace the tracked list verbatim with a restored snapshot."""
        self._commit(tuple(entries))

    def reset(self) -> None:
        """Stop tracking every file."""
        self._commit(())

    # --- Internals ---

    def _select_new(self, candidates: Sequence[UploadCandidate]) -> list[tuple[str, NewUpload]]:
        """Partition candidates, keeping only new uploads (first occurrence per id)."""
        tracked_ids = {entry.id for entry in self._entries}
        seen: set[str] = set()
        pending: list[tuple[str, NewUpload]] = []

        for candidate in candidates:
            if isinstance(candidate, AlreadyTracked):
                logger.debug("Skipping restored file %s", candidate.file_id)
                continue

            file_id = identify(candidate.meta)
            if file_id in tracked_ids or file_id in seen:
                logger.debug("Skipping already tracked file %s", file_id)
                continue

            seen.add(file_id)
            pending.append((file_id, candidate))

        return pending

    async def _load(self, pending: tuple[str, NewUpload]) -> FileEntry | None:
        """Read and decode one new upload. Returns None on failure."""
        file_id, upload = pending
        name = upload.meta.name

        try:
            text = await upload.read()
            records = decode_or_raise(text, name)
        except (ReadError, DecodeError) as e:
            logger.error("Error processing file %s: %s", name, e)
            return None
        except (OSError, UnicodeDecodeError) as e:
            # Readers that do not wrap their own I/O failures
            logger.error("Error reading file %s: %s", name, e)
            return None

        return FileEntry(id=file_id, name=name, records=tuple(records))

    def _commit(self, entries: tuple[FileEntry, ...]) -> None:
        self._entries = entries
        for listener in self._listeners:
            listener(entries)
