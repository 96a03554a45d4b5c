"""
Core module - record codec and domain errors.
"""
from app.core.errors import (
    RecordsError,
    RecordNotFoundError,
    RecordStoreError,
    InvalidRecordIdError,
)
from app.core.record_codec import (
    NIL_OBJECT_ID,
    to_document,
    to_record,
    to_view,
    username_filter,
    username_update,
    parse_object_id,
)

__all__ = [
    "RecordsError",
    "RecordNotFoundError",
    "RecordStoreError",
    "InvalidRecordIdError",
    "NIL_OBJECT_ID",
    "to_document",
    "to_record",
    "to_view",
    "username_filter",
    "username_update",
    "parse_object_id",
]
