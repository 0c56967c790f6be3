"""
Converter exception hierarchy.

Every failure the core can hit is scoped to the unit of work it occurs in:

- DecodeError / ReadError: one uploaded file, which is then omitted
- StorageError: one persistence call, which then degrades to "no session"
- InvalidOptionError: one options update, which is rejected as a whole
- SessionDecisionPendingError: ingestion attempted before the user chose
  between restoring and discarding a stored session
"""


class ConverterError(Exception):
    """Base exception for all converter failures."""

    pass


class DecodeError(ConverterError):
    """Raised when a file's content cannot be parsed into records."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not decode '{file_name}': {reason}")


class ReadError(ConverterError):
    """Raised when a file's content stream fails to resolve."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not read '{file_name}': {reason}")


class StorageError(ConverterError):
    """Raised by storage backends when a read, write or removal fails."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage {operation} failed: {reason}")


class InvalidOptionError(ConverterError):
    """Raised when a conversion option value is outside the accepted set."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for option '{field_name}': {reason}")


class SessionDecisionPendingError(ConverterError):
    """Raised when work is attempted while a stored session awaits a restore decision."""

    def __init__(self) -> None:
        super().__init__(
            "A previous session is available. Restore it or start a new session first."
        )
