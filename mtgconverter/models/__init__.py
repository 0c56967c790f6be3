from mtgconverter.models.errors import (
    ConverterError,
    DecodeError,
    InvalidOptionError,
    ReadError,
    SessionDecisionPendingError,
    StorageError,
)
from mtgconverter.models.file_entry import FileEntry, FileMeta
from mtgconverter.models.options import (
    CONDITION_LABELS,
    DEFAULT_OPTIONS,
    Condition,
    ConversionOptions,
)
from mtgconverter.models.record import (
    CARD_NAME_FIELD,
    EDITION_FIELD,
    EXTRAS_FIELD,
    QUANTITY_FIELD,
    Record,
    make_record,
)
from mtgconverter.models.session import SessionData
from mtgconverter.models.upload import AlreadyTracked, NewUpload, UploadCandidate

__all__ = [
    "AlreadyTracked",
    "CARD_NAME_FIELD",
    "CONDITION_LABELS",
    "Condition",
    "ConversionOptions",
    "ConverterError",
    "DEFAULT_OPTIONS",
    "DecodeError",
    "EDITION_FIELD",
    "EXTRAS_FIELD",
    "FileEntry",
    "FileMeta",
    "InvalidOptionError",
    "NewUpload",
    "QUANTITY_FIELD",
    "ReadError",
    "Record",
    "SessionData",
    "SessionDecisionPendingError",
    "StorageError",
    "UploadCandidate",
    "make_record",
]
