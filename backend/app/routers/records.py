"""
Records router for create, read, update and delete on the dataset collection.

Successful reads answer 302 Found and write results are wrapped as
`{"result": "..."}`; both shapes are kept for compatibility with existing
clients.
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.errors import RecordNotFoundError, RecordStoreError
from app.database.connections import get_collection
from app.schemas.record import RecordCreate, RecordView, ResultMessage, UsernameUpdate
from app.services.record_service import RecordService

router = APIRouter(prefix="/api/v1", tags=["Records"])


async def get_record_service() -> RecordService:
    """Dependency to get RecordService instance."""
    collection = await get_collection()
    return RecordService(collection)


def _store_failure(e: RecordStoreError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(e),
    )


@router.get(
    "/collections",
    response_model=Optional[list[RecordView]],
    status_code=status.HTTP_302_FOUND,
    summary="List records",
)
async def list_records(
    record_service: RecordService = Depends(get_record_service),
):
    """
    List every record in store order.

    Returns `null` when the collection is empty.
    """
    try:
        return await record_service.list_records()
    except RecordStoreError as e:
        raise _store_failure(e)


@router.get(
    "/collections/{name}",
    response_model=RecordView,
    status_code=status.HTTP_302_FOUND,
    summary="Get record by username",
)
async def get_record(
    name: str,
    record_service: RecordService = Depends(get_record_service),
):
    """Get the first record whose username equals `name`."""
    try:
        return await record_service.get_record_by_username(name)
    except RecordNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except RecordStoreError as e:
        raise _store_failure(e)


@router.post(
    "/create/collection",
    response_model=ResultMessage,
    status_code=status.HTTP_201_CREATED,
    summary="Create record",
)
async def create_record(
    body: Optional[RecordCreate] = Body(None),
    record_service: RecordService = Depends(get_record_service),
):
    """
    Insert a record.

    - **username**: Username (defaults to empty string)
    - **password**: Password (defaults to empty string)

    A `null` body inserts a record with both fields empty.
    """
    try:
        inserted_id = await record_service.create_record(body or RecordCreate())
    except RecordStoreError as e:
        raise _store_failure(e)

    return ResultMessage(result=f"Inserted document with _id: {inserted_id}")


@router.put(
    "/update/collection/{id}",
    response_model=ResultMessage,
    status_code=status.HTTP_200_OK,
    summary="Update record username",
)
async def update_record(
    id: str,
    body: Optional[UsernameUpdate] = Body(None),
    record_service: RecordService = Depends(get_record_service),
):
    """
    Set the username of the record with the given ObjectId.

    Only `username` is changed. A malformed id modifies nothing. A `null`
    body sets the username to the empty string.
    """
    try:
        modified = await record_service.update_username(id, body or UsernameUpdate())
    except RecordStoreError as e:
        raise _store_failure(e)

    return ResultMessage(result=f"count of modified document: {modified}")


@router.delete(
    "/delete/collection/{name}",
    response_model=ResultMessage,
    status_code=status.HTTP_200_OK,
    summary="Delete record by username",
)
async def delete_record(
    name: str,
    record_service: RecordService = Depends(get_record_service),
):
    """Delete the first record whose username equals `name`."""
    try:
        deleted = await record_service.delete_record_by_username(name)
    except RecordStoreError as e:
        raise _store_failure(e)

    return ResultMessage(result=f"count of deleted document: {deleted}")
