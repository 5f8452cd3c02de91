"""
Phone endpoints.

These routes expose CRUD over the phone collection plus a bulk
replace through a file upload.  Request bodies are JSON objects or
form fields (see ``read_phone_body``); records are stored as received
and no ``id`` is generated on the server.  Persistence failures are
reported as HTTP 500 with a short message, lookups that miss as
HTTP 404 and malformed uploads as HTTP 400.

Each phone route is also registered with a trailing slash (hidden from
the schema); otherwise the static mount at ``/`` would answer it.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from phone_store_api.app.api.deps import get_phone_service, read_phone_body
from phone_store_api.app.core.store import (
    StoreError,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
)
from phone_store_api.app.schemas.phone import ErrorMessage, PhoneRecord
from phone_store_api.app.services.phone_service import PhoneService

router = APIRouter()

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

_not_found = {404: {"model": ErrorMessage, "description": "Phone not found"}}
_server_error = {500: {"model": ErrorMessage, "description": "Storage failure"}}


@router.get(
    "/phones",
    response_model=List[Any],
    responses={200: {"model": List[PhoneRecord]}, **_server_error},
)
@router.get("/phones/", response_model=List[Any], include_in_schema=False)
async def list_phones(service: PhoneService = Depends(get_phone_service)) -> List[Any]:
    """Return the full phone collection in stored order."""
    try:
        return await service.list_phones()
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read phone data",
        )


@router.post(
    "/phones",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": PhoneRecord}, **_server_error},
)
@router.post(
    "/phones/",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_phone(
    body: Dict[str, Any] = Depends(read_phone_body),
    service: PhoneService = Depends(get_phone_service),
) -> Dict[str, Any]:
    """Append a new phone record built from the request body."""
    try:
        return await service.create_phone(body)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add phone",
        )


@router.put(
    "/phones/{phone_id}",
    response_model=Dict[str, Any],
    responses={200: {"model": PhoneRecord}, **_not_found, **_server_error},
)
@router.put("/phones/{phone_id}/", response_model=Dict[str, Any], include_in_schema=False)
async def update_phone(
    phone_id: str,
    body: Dict[str, Any] = Depends(read_phone_body),
    service: PhoneService = Depends(get_phone_service),
) -> Dict[str, Any]:
    """Merge the body into the first phone with the given ``id``.

    Fields not present in the body are preserved.  Returns HTTP 404
    (and leaves the collection untouched) if no phone matches.
    """
    try:
        phone = await service.update_phone(phone_id, body)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update phone",
        )
    if phone is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Phone not found")
    return phone


@router.delete(
    "/phones/{phone_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_not_found, **_server_error},
)
@router.delete(
    "/phones/{phone_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False,
)
async def delete_phone(
    phone_id: str,
    service: PhoneService = Depends(get_phone_service),
) -> None:
    """Delete every phone with the given ``id``."""
    try:
        deleted = await service.delete_phone(phone_id)
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete phone",
        )
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Phone not found")
    return None


@router.post(
    "/upload-phones",
    response_model=List[Any],
    responses={
        200: {"model": List[PhoneRecord]},
        400: {"model": ErrorMessage, "description": "Missing, mistyped or invalid upload"},
        **_server_error,
    },
)
async def upload_phones(
    phones: Optional[UploadFile] = File(None),
    service: PhoneService = Depends(get_phone_service),
) -> List[Any]:
    """Replace the whole collection with an uploaded JSON file.

    The file must be sent as the multipart field ``phones`` with the
    ``application/json`` content type.  Its bytes overwrite the stored
    collection before they are parsed; an upload that turns out not to
    be a JSON array is reported as HTTP 400 but is not rolled back.
    """
    if phones is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file was uploaded.")
    if phones.content_type != JSON_CONTENT_TYPE:
        logger.info("Rejected upload %s with content type %s", phones.filename, phones.content_type)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file must be a JSON file.",
        )
    data = await phones.read()
    try:
        return await service.replace_phones(data)
    except StoreWriteError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to replace phones.json",
        )
    except StoreReadError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read new phones.json",
        )
    except StoreParseError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON format")
