"""
Exceptions shared by the repositories, services and endpoints.

Repositories raise ``StoreError`` for any database failure; services
raise the validation errors when a business rule rejects the input.
"Not found" is never an exception: lookups return ``None`` instead.
"""


class StoreError(Exception):
    """A query against the database failed."""


class AccountValidationError(ValueError):
    """Registration input was rejected."""


class MessageValidationError(ValueError):
    """Message input was rejected."""
