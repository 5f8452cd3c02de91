"""
FastAPI dependencies shared by the endpoint modules.
"""

import json
from typing import Any, Dict

from fastapi import HTTPException, Request, status

from phone_store_api.app.services.phone_service import PhoneService


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_phone_service(request: Request) -> PhoneService:
    """Build a ``PhoneService`` around the store attached to the app."""
    return PhoneService(request.app.state.store)


async def read_phone_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a field mapping.

    JSON bodies must be objects.  Form bodies contribute their text
    fields.  An empty body, or one with any other content type, yields
    ``{}``; no field validation is applied.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip() or "json" not in content_type:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body")
    if not isinstance(data, dict):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Request body must be a JSON object",
        )
    return data
