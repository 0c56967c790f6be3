from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from mtgconverter.models.record import Record, make_record


@dataclass(frozen=True, slots=True)
class FileMeta:
    """
    Metadata of an uploaded file.

    Attributes:
        name: File name as supplied by the uploader
        last_modified: Modification time in epoch milliseconds
        size: Size in bytes
    """

    name: str
    last_modified: int
    size: int


@dataclass(frozen=True, slots=True)
class FileEntry:
    """
    A tracked file and its decoded records.

    Attributes:
        id: Metadata-derived identifier, unique within a session
        name: File name
        records: Decoded rows in file order
        included: Whether the file's records feed the converted output
        is_restored: Transient provenance tag for restored sessions
    """

    id: str
    name: str
    records: tuple[Record, ...] = field(default_factory=tuple)
    included: bool = True
    is_restored: bool = False

    def toggled(self) -> FileEntry:
        """Return a copy with the inclusion flag flipped."""
        return replace(self, included=not self.included)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "records": [dict(record) for record in self.records],
            "included": self.included,
            "isRestored": self.is_restored,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileEntry:
        """
        Build an entry from its serialized form.

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        file_id = data.get("id")
        name = data.get("name")
        records = data.get("records")
        included = data.get("included", True)
        is_restored = data.get("isRestored", False)

        if not isinstance(file_id, str) or not isinstance(name, str):
            raise ValueError("File entry requires string 'id' and 'name'")
        if not isinstance(records, list):
            raise ValueError(f"File entry '{file_id}' has no record list")
        if not isinstance(included, bool) or not isinstance(is_restored, bool):
            raise ValueError(f"File entry '{file_id}' has non-boolean flags")

        frozen: list[Record] = []
        for row in records:
            if not isinstance(row, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in row.items()
            ):
                raise ValueError(f"File entry '{file_id}' has a malformed record")
            frozen.append(make_record(row))

        return cls(
            id=file_id,
            name=name,
            records=tuple(frozen),
            included=included,
            is_restored=is_restored,
        )
