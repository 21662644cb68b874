"""
Tests for the SQLite bootstrap: migrations, connection settings.
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

import pytest

from social_media_api.app.core.db import (
    MIGRATIONS,
    get_connection,
    get_cursor,
    get_database_path,
    init_db,
)


def test_init_db_creates_tables(db_path: str) -> None:
    conn = get_connection(db_path)
    try:
        tables = {
            row["name"]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
    finally:
        conn.close()
    assert {"account", "message", "migrations"} <= tables


def test_init_db_is_idempotent(db_path: str) -> None:
    init_db(db_path)
    with get_cursor(db_path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_foreign_keys_are_enforced(db_path: str) -> None:
    conn = get_connection(db_path)
    try:
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (999, "orphan", 0),
            )
    finally:
        conn.close()


def test_username_is_unique(db_path: str) -> None:
    with get_cursor(db_path) as cursor:
        cursor.execute("INSERT INTO account (username, password) VALUES (?, ?)", ("bob", "pass"))
    with pytest.raises(sqlite3.IntegrityError):
        with get_cursor(db_path) as cursor:
            cursor.execute("INSERT INTO account (username, password) VALUES (?, ?)", ("bob", "other"))


def test_relative_database_path_is_resolved() -> None:
    path = get_database_path("some.db")
    assert os.path.isabs(path)
    assert Path(path).name == "some.db"


def test_absolute_database_path_is_kept(tmp_path: Path) -> None:
    target = str(tmp_path / "x.db")
    assert get_database_path(target) == target
