"""
Business logic for accounts.

Registration enforces a non-blank username, a password of at least
four characters and a unique username.  Login compares the password
in plain text; this mirrors the stored format and must be replaced
with a salted hash (bcrypt/argon2) before production use.

``StoreError`` raised by the repository is not caught here so callers
can tell a database failure apart from a rejected request.
"""

import logging
from typing import Optional

from social_media_api.app.core.errors import AccountValidationError
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.schemas.account import AccountCredentials, AccountRead


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Registration and login on top of an ``AccountRepository``."""

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    async def register(self, data: AccountCredentials) -> AccountRead:
        """Create a new account.

        Rules are checked in order: blank username, short password,
        existing username.  Any failure raises
        ``AccountValidationError`` without saying which rule failed.
        """
        username = data.username or ""
        password = data.password or ""
        if not username.strip():
            logger.info("Registration rejected: blank username")
            raise AccountValidationError("Username must not be blank")
        if len(password) < MIN_PASSWORD_LENGTH:
            logger.info("Registration rejected for %s: password too short", username)
            raise AccountValidationError("Password is too short")
        if self.accounts.get_account_by_username(username) is not None:
            logger.info("Registration rejected: username %s already taken", username)
            raise AccountValidationError("Username already exists")
        account = self.accounts.create_account(username, password)
        logger.info("Registered account %s (id=%s)", username, account.account_id)
        return account

    async def login(self, data: AccountCredentials) -> Optional[AccountRead]:
        """Return the stored account if the credentials match exactly, otherwise ``None``."""
        if data.username is None:
            return None
        account = self.accounts.get_account_by_username(data.username)
        if account is not None and account.password == data.password:
            logger.info("Account %s logged in", account.username)
            return account
        logger.info("Failed login for %s", data.username)
        return None
