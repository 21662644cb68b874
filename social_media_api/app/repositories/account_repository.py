"""
SQL access for the ``account`` table.
"""

from typing import Optional

from social_media_api.app.repositories.base import SqliteRepository
from social_media_api.app.schemas.account import AccountRead


class AccountRepository(SqliteRepository):
    """Insert and look up accounts."""

    def create_account(self, username: str, password: str) -> AccountRead:
        """Insert an account and return it with its generated id."""
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO account (username, password) VALUES (?, ?)",
                (username, password),
            )
            return AccountRead(
                account_id=cursor.lastrowid, username=username, password=password
            )

    def get_account_by_username(self, username: str) -> Optional[AccountRead]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT account_id, username, password FROM account WHERE username = ?",
                (username,),
            ).fetchone()
            if not row:
                return None
            return AccountRead(
                account_id=row["account_id"],
                username=row["username"],
                password=row["password"],
            )

    def get_account_by_id(self, account_id: int) -> Optional[AccountRead]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
            if not row:
                return None
            return AccountRead(
                account_id=row["account_id"],
                username=row["username"],
                password=row["password"],
            )
