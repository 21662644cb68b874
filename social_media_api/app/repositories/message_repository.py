"""
SQL access for the ``message`` table.

All reads return rows in storage order (``message_id`` ascending).
Business rules such as the text length limit are not checked here;
see ``MessageService``.
"""

import sqlite3
from typing import List, Optional

from social_media_api.app.repositories.base import SqliteRepository
from social_media_api.app.schemas.message import MessageRead


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


def _row_to_message(row: sqlite3.Row) -> MessageRead:
    return MessageRead(
        message_id=row["message_id"],
        posted_by=row["posted_by"],
        message_text=row["message_text"],
        time_posted_epoch=row["time_posted_epoch"],
    )


class MessageRepository(SqliteRepository):
    """Insert, read, update and delete messages."""

    def create_message(
        self, posted_by: int, message_text: str, time_posted_epoch: int
    ) -> MessageRead:
        """Insert a message and return it with its generated id."""
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (posted_by, message_text, time_posted_epoch),
            )
            return MessageRead(
                message_id=cursor.lastrowid,
                posted_by=posted_by,
                message_text=message_text,
                time_posted_epoch=time_posted_epoch,
            )

    def list_messages(self) -> List[MessageRead]:
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM message ORDER BY message_id"
            ).fetchall()
            return [_row_to_message(row) for row in rows]

    def get_message(self, message_id: int) -> Optional[MessageRead]:
        with self._connection() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
            return _row_to_message(row) if row else None

    def list_messages_by_account(self, account_id: int) -> List[MessageRead]:
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
            return [_row_to_message(row) for row in rows]

    def update_message_text(self, message_id: int, message_text: str) -> int:
        """Replace the text of a message.

        Returns the number of rows changed, ``0`` when the id does not
        exist.
        """
        with self._connection() as conn:
            cursor = conn.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (message_text, message_id),
            )
            return cursor.rowcount

    def delete_message(self, message_id: int) -> int:
        """Delete a message and return the number of rows removed."""
        with self._connection() as conn:
            cursor = conn.execute(
                "DELETE FROM message WHERE message_id = ?", (message_id,)
            )
            return cursor.rowcount
