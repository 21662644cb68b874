"""
Tests for AccountRepository and MessageRepository against a real SQLite file.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from unittest.mock import patch

import pytest

from social_media_api.app.core.errors import StoreError
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository


def test_create_and_lookup_account(account_repo: AccountRepository) -> None:
    created = account_repo.create_account("alice", "secret")
    assert created.account_id > 0

    assert account_repo.get_account_by_username("alice") == created
    assert account_repo.get_account_by_id(created.account_id) == created
    assert account_repo.get_account_by_username("nobody") is None
    assert account_repo.get_account_by_id(created.account_id + 100) is None


def test_duplicate_username_is_a_store_error(account_repo: AccountRepository) -> None:
    account_repo.create_account("alice", "secret")
    with pytest.raises(StoreError):
        account_repo.create_account("alice", "another")


def test_message_crud(account_repo: AccountRepository, message_repo: MessageRepository) -> None:
    author = account_repo.create_account("alice", "secret")
    first = message_repo.create_message(author.account_id, "first", 1000)
    second = message_repo.create_message(author.account_id, "second", 2000)

    assert [m.message_id for m in message_repo.list_messages()] == [first.message_id, second.message_id]
    assert message_repo.get_message(first.message_id) == first

    assert message_repo.update_message_text(first.message_id, "edited") == 1
    assert message_repo.get_message(first.message_id).message_text == "edited"
    assert message_repo.update_message_text(9999, "nothing") == 0

    assert message_repo.delete_message(second.message_id) == 1
    assert message_repo.get_message(second.message_id) is None
    assert message_repo.delete_message(second.message_id) == 0


def test_list_messages_by_account(account_repo: AccountRepository, message_repo: MessageRepository) -> None:
    alice = account_repo.create_account("alice", "secret")
    bob = account_repo.create_account("bob", "secret")
    message_repo.create_message(alice.account_id, "from alice", 1)
    message_repo.create_message(bob.account_id, "from bob", 2)
    message_repo.create_message(alice.account_id, "alice again", 3)

    texts = [m.message_text for m in message_repo.list_messages_by_account(alice.account_id)]
    assert texts == ["from alice", "alice again"]
    assert message_repo.list_messages_by_account(12345) == []


def test_unknown_author_violates_foreign_key(message_repo: MessageRepository) -> None:
    with pytest.raises(StoreError):
        message_repo.create_message(42, "orphan", 0)


def test_missing_schema_raises_store_error(tmp_path: Path) -> None:
    repo = MessageRepository(str(tmp_path / "empty.db"))
    with pytest.raises(StoreError):
        repo.list_messages()


def test_connection_failure_raises_store_error(account_repo: AccountRepository) -> None:
    with patch(
        "social_media_api.app.repositories.base.get_connection",
        side_effect=sqlite3.OperationalError("unable to open database file"),
    ):
        with pytest.raises(StoreError):
            account_repo.get_account_by_id(1)


def test_integer_overflow_raises_store_error(message_repo: MessageRepository) -> None:
    with pytest.raises(StoreError):
        message_repo.get_message(2**70)
