"""
File identity.

A file is identified by its metadata alone: name, modification time and
size. Content is never hashed, so two distinct files that coincidentally
share all three fields are treated as the same file.
"""

from mtgconverter.models.file_entry import FileMeta

# Joins the metadata fields; matches the id format of stored sessions
ID_SEPARATOR = "-"


def identify(meta: FileMeta) -> str:
    """Compute the deduplication id for an uploaded file."""
    return ID_SEPARATOR.join((meta.name, str(meta.last_modified), str(meta.size)))
