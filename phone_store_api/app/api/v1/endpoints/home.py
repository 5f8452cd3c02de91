"""
Root endpoint returning a plain-text welcome message.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the HyperOS Phone Management API."


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
