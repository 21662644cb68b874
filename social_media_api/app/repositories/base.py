"""
Shared connection handling for the SQLite repositories.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from social_media_api.app.core.db import get_connection
from social_media_api.app.core.errors import StoreError


class SqliteRepository:
    """Base class holding the database path used by a repository.

    Each repository call opens its own connection through
    ``_connection`` and closes it when the call returns, whether it
    succeeded or not.  Any ``sqlite3.Error``, and the ``OverflowError``
    raised when an integer parameter does not fit in 64 bits, is
    re-raised as ``StoreError``.
    """

    def __init__(self, database_path: Optional[str] = None):
        self.database_path = database_path

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = get_connection(self.database_path)
        except (sqlite3.Error, OverflowError) as e:
            raise StoreError(f"Could not open database: {e}") from e
        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            # OverflowError: an int parameter exceeds SQLite's 64-bit INTEGER.
            conn.rollback()
            raise StoreError(str(e)) from e
        finally:
            conn.close()
