"""
Business logic for messages.

Message text must be non-blank and at most ``MAX_MESSAGE_LENGTH``
characters, both on creation and on update, and a new message must
reference an existing account.  Reads are passthroughs to the
repository.  Lookups of a missing message return ``None``; only rule
violations raise (``MessageValidationError``).
"""

import logging
from typing import List, Optional

from social_media_api.app.core.errors import MessageValidationError
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.schemas.message import (
    MAX_MESSAGE_LENGTH,
    MessageCreate,
    MessageRead,
)


logger = logging.getLogger(__name__)


def _check_text(message_text: Optional[str]) -> str:
    text = message_text or ""
    if not text.strip():
        raise MessageValidationError("Message text must not be blank")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise MessageValidationError(
            f"Message text must be at most {MAX_MESSAGE_LENGTH} characters"
        )
    return text


class MessageService:
    """Message operations on top of the message and account repositories."""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository):
        self.messages = messages
        self.accounts = accounts

    async def create_message(self, data: MessageCreate) -> MessageRead:
        text = _check_text(data.message_text)
        if data.posted_by is None or self.accounts.get_account_by_id(data.posted_by) is None:
            logger.info("Message rejected: unknown author %s", data.posted_by)
            raise MessageValidationError(f"Account {data.posted_by} does not exist")
        message = self.messages.create_message(data.posted_by, text, data.time_posted_epoch)
        logger.info("Account %s posted message %s", message.posted_by, message.message_id)
        return message

    async def list_messages(self) -> List[MessageRead]:
        return self.messages.list_messages()

    async def get_message(self, message_id: int) -> Optional[MessageRead]:
        return self.messages.get_message(message_id)

    async def list_messages_by_account(self, account_id: int) -> List[MessageRead]:
        return self.messages.list_messages_by_account(account_id)

    async def update_message(self, message_id: int, message_text: Optional[str]) -> Optional[MessageRead]:
        """Replace the text of a message and return the stored result.

        The new text is validated first.  The update itself is then
        written unconditionally and the message is read back, so an
        unknown id yields ``None`` rather than an error.
        """
        text = _check_text(message_text)
        self.messages.update_message_text(message_id, text)
        updated = self.messages.get_message(message_id)
        if updated is None:
            logger.debug("Update of unknown message %s", message_id)
        else:
            logger.info("Message %s updated", message_id)
        return updated

    async def delete_message(self, message_id: int) -> Optional[MessageRead]:
        """Delete a message and return its content as it was before deletion.

        Returns ``None`` without issuing a DELETE when the message does
        not exist.
        """
        message = self.messages.get_message(message_id)
        if message is None:
            return None
        self.messages.delete_message(message_id)
        logger.info("Message %s deleted", message_id)
        return message
