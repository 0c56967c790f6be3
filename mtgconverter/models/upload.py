"""
Upload candidates at the ingestion boundary.

An upload event carries either a genuinely new file, which must be read
and decoded, or a reference to a file already tracked from a restored
session, which must be left as-is.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from mtgconverter.models.file_entry import FileMeta

ContentReader = Callable[[], Awaitable[str]]


@dataclass(frozen=True, slots=True)
class NewUpload:
    """A file whose content still has to be read and decoded."""

    meta: FileMeta
    read: ContentReader


@dataclass(frozen=True, slots=True)
class AlreadyTracked:
    """A file re-surfaced from a restored session."""

    file_id: str


UploadCandidate = NewUpload | AlreadyTracked
