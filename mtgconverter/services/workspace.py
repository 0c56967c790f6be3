"""
Converter Workspace.

Wires the ingestion store, the output reprocessor and the session store
into one work session, and runs the startup protocol:

1. On start, look for a stored session.
2. If one exists, close the decision gate: nothing may change until the
   user either restores it or starts a new session.
3. Restoring seeds files and options verbatim from the snapshot (stored
   records are trusted, never re-decoded). Starting new clears storage.
4. From then on every change to the files or options is saved, except the
   single save that would immediately follow a restore.
"""

import logging
from collections.abc import Sequence

from mtgconverter.models.errors import SessionDecisionPendingError
from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import DEFAULT_OPTIONS, ConversionOptions
from mtgconverter.models.session import SessionData
from mtgconverter.models.upload import UploadCandidate
from mtgconverter.services.file_ingestion import FileIngestionStore
from mtgconverter.services.options_reprocessor import OptionsReprocessor
from mtgconverter.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class ConverterWorkspace:
    """One in-progress conversion session."""

    def __init__(
        self,
        session_store: SessionStore,
        store: FileIngestionStore | None = None,
    ) -> None:
        self._session_store = session_store
        self._store = store or FileIngestionStore()
        self._reprocessor = OptionsReprocessor()
        self._pending_session: SessionData | None = None
        self._awaiting_decision = False
        self._just_restored = False
        self._files_dirty = False

        self._store.subscribe(self._on_files_changed)

    # --- Read path ---

    @property
    def files(self) -> tuple[FileEntry, ...]:
        return self._store.entries

    @property
    def options(self) -> ConversionOptions:
        return self._reprocessor.options

    @property
    def output(self) -> str:
        return self._reprocessor.output

    @property
    def processing(self) -> bool:
        return self._store.processing

    @property
    def awaiting_decision(self) -> bool:
        return self._awaiting_decision

    @property
    def pending_session(self) -> SessionData | None:
        return self._pending_session

    @property
    def just_restored(self) -> bool:
        return self._just_restored

    async def storage_reachable(self) -> bool:
        return await self._session_store.is_reachable()

    # --- Startup protocol ---

    async def start(self) -> SessionData | None:
        """
        Check storage for a previous session.

        Returns:
            The stored session awaiting a decision, or None if there is none
        """
        session = await self._session_store.load()
        if session is None:
            return None

        logger.info(
            "Found stored session from %d with %d files",
            session.timestamp,
            len(session.file_entries),
        )
        self._pending_session = session
        self._awaiting_decision = True
        return session

    async def restore_session(self) -> SessionData | None:
        """
        Seed files and options from the stored session.

        Only answers the startup decision; once the decision is made the
        live session is never rewound to what storage holds.

        Returns:
            The restored session, or None if no decision was pending
        """
        session = self._pending_session
        if not self._awaiting_decision or session is None:
            logger.warning("No stored session awaiting a decision; nothing restored")
            return None

        self._pending_session = None
        self._awaiting_decision = False
        self._just_restored = True
        self._reprocessor.options_changed(session.options)
        self._store.restore(session.file_entries)
        logger.info("Restored session with %d files", len(session.file_entries))

        await self._persist()
        return session

    async def start_new_session(self) -> None:
        """Discard any stored session and return to defaults."""
        await self._session_store.clear()
        self._pending_session = None
        self._awaiting_decision = False
        self._just_restored = False

        self._reprocessor.options_changed(DEFAULT_OPTIONS)
        self._store.reset()
        # Storage was just cleared; the empty defaults are not written back
        self._files_dirty = False

    # --- Mutations ---

    async def ingest(self, candidates: Sequence[UploadCandidate]) -> list[FileEntry]:
        """Ingest uploaded files into the session."""
        self._require_decision()
        added = await self._store.ingest(candidates)
        await self._persist_if_files_changed()
        return added

    async def toggle_included(self, file_id: str) -> None:
        self._require_decision()
        self._store.toggle_included(file_id)
        await self._persist_if_files_changed()

    async def remove(self, file_id: str) -> None:
        self._require_decision()
        self._store.remove(file_id)
        await self._persist_if_files_changed()

    async def reset(self) -> None:
        self._require_decision()
        self._store.reset()
        await self._persist_if_files_changed()

    async def set_options(self, options: ConversionOptions) -> str:
        """
        Replace the conversion options.

        Returns:
            The recomputed output text
        """
        self._require_decision()
        if options == self._reprocessor.options:
            return self._reprocessor.output

        output = self._reprocessor.options_changed(options)
        await self._persist()
        return output

    # --- Internals ---

    def _require_decision(self) -> None:
        if self._awaiting_decision:
            raise SessionDecisionPendingError()

    def _on_files_changed(self, entries: tuple[FileEntry, ...]) -> None:
        self._reprocessor.files_changed(entries)
        self._files_dirty = True

    async def _persist_if_files_changed(self) -> None:
        if self._files_dirty:
            await self._persist()

    async def _persist(self) -> None:
        self._files_dirty = False
        if self._just_restored:
            # Consumed once: the restored snapshot is already what storage holds
            self._just_restored = False
            logger.debug("Skipping save immediately after restore")
            return

        await self._session_store.save(self._store.entries, self._reprocessor.options)
