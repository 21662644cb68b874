"""
Top-level router of the API.

Aggregates the domain routers.  Account routes define their own full
paths (``/register``, ``/login``, ``/accounts/...``); message routes
live under ``/messages``.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
