"""
Response and request models shared by the API routers.
"""

from pydantic import BaseModel, Field

from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import Condition, ConversionOptions


class FileResponse(BaseModel):
    """A tracked file, without its records."""

    id: str
    name: str
    record_count: int
    included: bool

    @classmethod
    def from_entry(cls, entry: FileEntry) -> "FileResponse":
        return cls(
            id=entry.id,
            name=entry.name,
            record_count=len(entry.records),
            included=entry.included,
        )


class FileListResponse(BaseModel):
    """Response model for the tracked file list."""

    files: list[FileResponse] = Field(default_factory=list)
    processing: bool = False


class OptionsModel(BaseModel):
    """Conversion options as exposed to clients."""

    condition: Condition = Field(
        default=Condition.NEAR_MINT,
        description="Condition grade: nm, sp, mp, hp or dm",
    )
    ignore_edition: bool = Field(default=False, description="Omit the [EDICAO=...] tag")
    force_condition: bool = Field(default=False, description="Emit the [QUALIDADE=...] tag")

    @classmethod
    def from_options(cls, options: ConversionOptions) -> "OptionsModel":
        return cls(
            condition=options.condition,
            ignore_edition=options.ignore_edition,
            force_condition=options.force_condition,
        )

    def to_options(self) -> ConversionOptions:
        return ConversionOptions(
            condition=self.condition,
            ignore_edition=self.ignore_edition,
            force_condition=self.force_condition,
        )


class OutputResponse(BaseModel):
    """Converted LigaMagic text."""

    text: str
    line_count: int


class SessionStatusResponse(BaseModel):
    """Whether a stored session is waiting for a restore decision."""

    awaiting_decision: bool
    stored_file_count: int = 0
    stored_timestamp: int | None = None
