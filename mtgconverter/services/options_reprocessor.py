"""
Output recomputation.

The converted text is a pure function of the tracked files and the
options. OptionsReprocessor keeps the latest rendering and replaces it
whenever either input changes.
"""

import logging
from collections.abc import Iterable

from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import DEFAULT_OPTIONS, ConversionOptions
from mtgconverter.models.record import Record
from mtgconverter.services.liga_formatter import render_all

logger = logging.getLogger(__name__)


def collect_included_records(entries: Iterable[FileEntry]) -> list[Record]:
    """Concatenate the records of included files, in file-list order."""
    return [record for entry in entries if entry.included for record in entry.records]


def reprocess(entries: Iterable[FileEntry], options: ConversionOptions) -> str:
    """Render the included records of the given files."""
    return render_all(collect_included_records(entries), options)


class OptionsReprocessor:
    """Holds the current output text and recomputes it on every relevant change."""

    def __init__(self, options: ConversionOptions = DEFAULT_OPTIONS) -> None:
        self._entries: tuple[FileEntry, ...] = ()
        self._options = options
        self._output = ""

    @property
    def options(self) -> ConversionOptions:
        return self._options

    @property
    def output(self) -> str:
        return self._output

    def files_changed(self, entries: Iterable[FileEntry]) -> str:
        """Recompute after the tracked file list changed."""
        self._entries = tuple(entries)
        return self._recompute()

    def options_changed(self, options: ConversionOptions) -> str:
        """Recompute after the options changed."""
        self._options = options
        return self._recompute()

    def _recompute(self) -> str:
        self._output = reprocess(self._entries, self._options)
        logger.debug(
            "Recomputed output: %d lines from %d files",
            self._output.count("\n") + 1 if self._output else 0,
            len(self._entries),
        )
        return self._output
