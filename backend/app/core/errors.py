"""
Domain errors raised by the record service and codec.
"""


class RecordsError(Exception):
    """Base class for record errors."""


class RecordNotFoundError(RecordsError, LookupError):
    """No document matched the query."""

    def __init__(self, message: str = "no documents in result"):
        super().__init__(message)


class RecordStoreError(RecordsError):
    """A storage call failed or exceeded its deadline."""


class InvalidRecordIdError(RecordsError, ValueError):
    """An identifier is not a 24 character hex string."""
