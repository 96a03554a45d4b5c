"""
Conversion between wire payloads and stored record documents.

Stored documents have the shape `{_id, username, password}`. The `_id` is
read-only: it is never written by the codec and never appears in a view.
"""
from typing import Any, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from app.core.errors import InvalidRecordIdError
from app.models.record import Record
from app.schemas.record import RecordCreate, RecordView, UsernameUpdate

NIL_OBJECT_ID = ObjectId("0" * 24)


def to_document(request: RecordCreate) -> dict[str, Any]:
    """Build the document inserted for a create request."""
    return {"username": request.username, "password": request.password}


def to_record(document: Mapping[str, Any]) -> Record:
    """Decode a stored document. Missing fields decode to empty strings."""
    object_id = document.get("_id")
    return Record(
        id=str(object_id) if object_id is not None else None,
        username=document.get("username") or "",
        password=document.get("password") or "",
    )


def to_view(document: Mapping[str, Any]) -> RecordView:
    """Project a stored document onto its outward view."""
    record = to_record(document)
    return RecordView(username=record.username, password=record.password)


def username_filter(name: str) -> dict[str, Any]:
    """Exact-match filter on username."""
    return {"username": name}


def username_update(request: UsernameUpdate) -> dict[str, Any]:
    """Partial update touching only the username."""
    return {"$set": {"username": request.username}}


def parse_object_id(value: str) -> ObjectId:
    """Parse a 24 character hex identifier."""
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidRecordIdError(f"the provided hex string is not a valid ObjectID: {value!r}")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidRecordIdError(str(e)) from e
