"""
Account endpoints.

Provide registration, login and the list of messages posted by an
account.  Failures carry no body: registration answers 400 and login
answers 401 whatever the cause, including database errors.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Response, status

from social_media_api.app.api.deps import get_account_service, get_message_service
from social_media_api.app.core.errors import AccountValidationError, StoreError
from social_media_api.app.schemas.account import AccountCredentials, AccountRead
from social_media_api.app.schemas.message import MessageRead
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AccountRead)
async def register_account(
    data: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> Union[AccountRead, Response]:
    """Register a new account.

    Returns the stored account with its generated ``account_id``, or
    400 with an empty body when the username is blank or taken or the
    password is shorter than four characters.
    """
    try:
        return await service.register(data)
    except AccountValidationError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    except StoreError:
        logger.exception("Registration failed for %s", data.username)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.post("/login", response_model=AccountRead)
async def login(
    data: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> Union[AccountRead, Response]:
    """Return the account matching the credentials, or 401 with an empty body."""
    try:
        account = await service.login(data)
    except StoreError:
        logger.exception("Login failed for %s", data.username)
        account = None
    if account is None:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return account


@router.get("/accounts/{account_id}/messages", response_model=List[MessageRead])
async def list_account_messages(
    account_id: int,
    service: MessageService = Depends(get_message_service),
) -> List[MessageRead]:
    """List the messages posted by an account; empty for unknown accounts."""
    try:
        return await service.list_messages_by_account(account_id)
    except StoreError:
        logger.exception("Could not list messages of account %s", account_id)
        return []
