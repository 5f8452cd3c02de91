"""
Top-level router for version 1 of the API.

This router aggregates the endpoint modules.  Routes are mounted at
the application root (``/phones``, ``/upload-phones``), matching the
paths existing clients use, so no version prefix is applied.
"""

from fastapi import APIRouter

from .endpoints import home, phones

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(phones.router, tags=["phones"])
