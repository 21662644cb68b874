"""
Pydantic models for message data.

The wire names are ``message_id``, ``posted_by``, ``message_text`` and
``time_posted_epoch``.  ``id`` and ``posted_at`` are accepted on input
as aliases of ``message_id`` and ``time_posted_epoch``.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


MAX_MESSAGE_LENGTH = 255


class MessageCreate(BaseModel):
    """Body of ``POST /messages``.

    ``message_id`` is ignored.  A missing ``time_posted_epoch`` defaults
    to ``0``; a missing ``posted_by`` never matches an account.
    """

    message_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("message_id", "id")
    )
    posted_by: Optional[int] = Field(None, examples=[1])
    message_text: Optional[str] = Field(None, examples=["hello world"])
    time_posted_epoch: int = Field(
        0,
        validation_alias=AliasChoices("time_posted_epoch", "posted_at"),
        examples=[1669947792],
    )


class MessageUpdate(BaseModel):
    """Body of ``PATCH /messages/{message_id}``; only the text can change."""

    message_text: Optional[str] = Field(None, examples=["updated text"])


class MessageRead(BaseModel):
    """Stored message as returned by the API."""

    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int

    model_config = {
        "from_attributes": True,
    }
