"""
API dependencies.

Builds the repositories and services for each request from the
database path stored on ``app.state`` by ``create_app``.  Endpoints
receive services through ``Depends`` so tests can override any level
with ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


def get_database_path(request: Request) -> str:
    return request.app.state.database_path


def get_account_repository(database_path: str = Depends(get_database_path)) -> AccountRepository:
    return AccountRepository(database_path)


def get_message_repository(database_path: str = Depends(get_database_path)) -> MessageRepository:
    return MessageRepository(database_path)


def get_account_service(
    accounts: AccountRepository = Depends(get_account_repository),
) -> AccountService:
    return AccountService(accounts)


def get_message_service(
    messages: MessageRepository = Depends(get_message_repository),
    accounts: AccountRepository = Depends(get_account_repository),
) -> MessageService:
    return MessageService(messages, accounts)
