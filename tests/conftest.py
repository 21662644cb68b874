"""
Shared fixtures: a fresh SQLite file per test, the repositories and
services bound to it, and a TestClient around an app using it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.db import init_db
from social_media_api.app.main import create_app
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "social_media.db")
    init_db(path)
    return path


@pytest.fixture
def account_repo(db_path: str) -> AccountRepository:
    return AccountRepository(db_path)


@pytest.fixture
def message_repo(db_path: str) -> MessageRepository:
    return MessageRepository(db_path)


@pytest.fixture
def account_service(account_repo: AccountRepository) -> AccountService:
    return AccountService(account_repo)


@pytest.fixture
def message_service(message_repo: MessageRepository, account_repo: AccountRepository) -> MessageService:
    return MessageService(message_repo, account_repo)


@pytest.fixture
def client(db_path: str) -> Iterator[TestClient]:
    with TestClient(create_app(db_path)) as test_client:
        yield test_client
