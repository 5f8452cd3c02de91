"""
Pydantic schemas for phone records.

Phone records have no fixed shape.  ``PhoneRecord`` documents the
one field the API interprets (``id``) and allows any other field.
It is used for OpenAPI documentation only: request bodies are taken
as plain JSON objects and stored without validation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PhoneRecord(BaseModel):
    """A phone record: an ``id`` plus arbitrary extra fields."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {"id": "1", "model": "Xiaomi 14", "os": "HyperOS 1.0"},
        },
    )

    id: Optional[str] = Field(None, description="Identifier used by update and delete")


class ErrorMessage(BaseModel):
    """Error payload returned by ``HTTPException``."""

    detail: str
