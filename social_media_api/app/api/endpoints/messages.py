"""
Message endpoints.

A missing message is answered with 200 and an empty body on read and
delete; this is part of the public contract and must not become a 404.
Database errors are logged and then answered exactly like the
operation's ordinary failure.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Response, status

from social_media_api.app.api.deps import get_message_service
from social_media_api.app.core.errors import MessageValidationError, StoreError
from social_media_api.app.schemas.message import MessageCreate, MessageRead, MessageUpdate
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


def _empty(status_code: int = status.HTTP_200_OK) -> Response:
    return Response(status_code=status_code)


@router.post("", response_model=MessageRead)
async def create_message(
    data: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    """Post a message.

    Answers 400 with an empty body when the text is blank or longer
    than 255 characters, or when ``posted_by`` is not an account.
    """
    try:
        return await service.create_message(data)
    except MessageValidationError:
        return _empty(status.HTTP_400_BAD_REQUEST)
    except StoreError:
        logger.exception("Could not create message for account %s", data.posted_by)
        return _empty(status.HTTP_400_BAD_REQUEST)


@router.get("", response_model=List[MessageRead])
async def list_messages(
    service: MessageService = Depends(get_message_service),
) -> List[MessageRead]:
    try:
        return await service.list_messages()
    except StoreError:
        logger.exception("Could not list messages")
        return []


@router.get("/{message_id}", response_model=MessageRead)
async def get_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    try:
        message = await service.get_message(message_id)
    except StoreError:
        logger.exception("Could not read message %s", message_id)
        message = None
    return message if message is not None else _empty()


@router.delete("/{message_id}", response_model=MessageRead)
async def delete_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    """Delete a message and return it as it was; empty 200 when it does not exist."""
    try:
        message = await service.delete_message(message_id)
    except StoreError:
        logger.exception("Could not delete message %s", message_id)
        message = None
    return message if message is not None else _empty()


@router.patch("/{message_id}", response_model=MessageRead)
async def update_message(
    message_id: int,
    data: MessageUpdate,
    service: MessageService = Depends(get_message_service),
) -> Union[MessageRead, Response]:
    """Replace a message's text.

    Answers 400 with an empty body when the new text is invalid or the
    message does not exist.
    """
    try:
        message = await service.update_message(message_id, data.message_text)
    except MessageValidationError:
        message = None
    except StoreError:
        logger.exception("Could not update message %s", message_id)
        message = None
    if message is None:
        return _empty(status.HTTP_400_BAD_REQUEST)
    return message
