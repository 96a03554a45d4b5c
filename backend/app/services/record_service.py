"""
Record service for CRUD operations on the dataset collection.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar

import pymongo
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core import record_codec
from app.core.errors import InvalidRecordIdError, RecordNotFoundError, RecordStoreError
from app.schemas.record import RecordCreate, RecordView, UsernameUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordService:
    """Service for record operations."""

    def __init__(self, collection: AsyncIOMotorCollection, timeout: Optional[float] = None):
        """Initialize with the records collection and a per-call deadline in seconds."""
        self.collection = collection
        if timeout is None:
            timeout = get_settings().request_timeout_seconds
        self.timeout = timeout

    async def _run(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        """
        Run a storage call under a fresh deadline, translating driver failures.

        The call is started inside a `pymongo.timeout` scope so the driver
        itself gives up at the deadline; `asyncio.wait_for` bounds the wait.
        """
        try:
            with pymongo.timeout(self.timeout):
                return await asyncio.wait_for(call(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"{operation} exceeded {self.timeout}s deadline")
            raise RecordStoreError("deadline exceeded") from e
        except PyMongoError as e:
            logger.error(f"{operation} failed: {e}")
            raise RecordStoreError(str(e)) from e

    def _decode(self, document: Mapping[str, Any]) -> RecordView:
        """Project a stored document, treating undecodable documents as store failures."""
        try:
            return record_codec.to_view(document)
        except ValidationError as e:
            logger.error(f"Undecodable record {document.get('_id')}: {e.error_count()} error(s)")
            raise RecordStoreError(str(e)) from e

    # ==================== Reads ====================

    async def list_records(self) -> Optional[list[RecordView]]:
        """
        List every record in store order.

        Returns None for an empty collection so the response body is `null`.
        """
        cursor = self.collection.find({})
        try:
            documents = await self._run("list records", lambda: cursor.to_list(length=None))
        except BaseException:
            # A drained cursor is closed by the driver; an abandoned one is not.
            await cursor.close()
            raise

        views = [self._decode(doc) for doc in documents]
        return views or None

    async def get_record_by_username(self, name: str) -> RecordView:
        """
        Get the first record whose username equals `name`.

        Raises:
            RecordNotFoundError: If no record matches
        """
        document = await self._run(
            "find record",
            lambda: self.collection.find_one(record_codec.username_filter(name)),
        )
        if document is None:
            raise RecordNotFoundError()
        return self._decode(document)

    # ==================== Writes ====================

    async def create_record(self, request: RecordCreate) -> str:
        """Insert a record and return its identifier as a hex string."""
        result = await self._run(
            "insert record",
            lambda: self.collection.insert_one(record_codec.to_document(request)),
        )
        return str(result.inserted_id)

    async def update_username(self, record_id: str, request: UsernameUpdate) -> int:
        """
        Set the username of the record with `record_id`.

        A malformed identifier falls back to the nil ObjectId, so the update
        matches nothing and 0 is returned.
        """
        try:
            object_id = record_codec.parse_object_id(record_id)
        except InvalidRecordIdError as e:
            logger.warning(f"Malformed record id, using nil ObjectId: {e}")
            object_id = record_codec.NIL_OBJECT_ID

        result = await self._run(
            "update record",
            lambda: self.collection.update_one(
                {"_id": object_id},
                record_codec.username_update(request),
            ),
        )
        return result.modified_count

    async def delete_record_by_username(self, name: str) -> int:
        """Delete the first record whose username equals `name`; returns 0 or 1."""
        result = await self._run(
            "delete record",
            lambda: self.collection.delete_one(record_codec.username_filter(name)),
        )
        return result.deleted_count

