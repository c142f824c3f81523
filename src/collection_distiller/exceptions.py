"""Custom exceptions for the collection generator."""


class DistillerError(Exception):
    """Base exception for all generator errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class EntryError(DistillerError):
    """Raised when a single feed entry cannot be turned into a document."""

    def __init__(self, message: str, uid: str | None = None, *args, **kwargs):
        self.uid = uid
        super().__init__(message, *args, **kwargs)


class InvalidDateError(EntryError):
    """Raised when an entry date is not a parseable ISO-8601 date."""

    def __init__(self, value, uid: str | None = None):
        self.value = value
        super().__init__(f"Invalid ISO-8601 date: {value!r}", uid=uid)


class EntryValidationError(EntryError):
    """Raised when an entry is missing fields or has fields of the wrong type."""

    def __init__(self, message: str, uid: str | None = None, errors: list | None = None):
        self.errors = errors or []
        super().__init__(message, uid=uid)


class EmitError(DistillerError):
    """Raised when an output file or directory cannot be written."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)
