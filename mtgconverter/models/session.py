from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import ConversionOptions


@dataclass(frozen=True, slots=True)
class SessionData:
    """
    A persisted snapshot of the work session.

    Attributes:
        version: Schema version the snapshot was written with
        file_entries: Tracked files at save time
        options: Conversion options at save time
        timestamp: Save time in epoch milliseconds
    """

    version: str
    file_entries: tuple[FileEntry, ...] = field(default_factory=tuple)
    options: ConversionOptions = field(default_factory=ConversionOptions)
    timestamp: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "fileEntries": [entry.to_dict() for entry in self.file_entries],
            "options": self.options.to_dict(),
            "timestamp": self.timestamp,
        }
