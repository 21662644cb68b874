"""
Pydantic models for account data.

Field names match the JSON wire format of the API (``account_id``,
``username``, ``password``).  ``id`` is accepted as an input alias of
``account_id``.  Input fields are optional on purpose: a missing
username or password is a business-rule failure handled by
``AccountService`` (400/401), not a schema error (422).
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class AccountCredentials(BaseModel):
    """Body of ``POST /register`` and ``POST /login``.

    Any ``account_id`` sent by the client is ignored.
    """

    account_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("account_id", "id")
    )
    username: Optional[str] = Field(None, examples=["bob"])
    password: Optional[str] = Field(None, examples=["pass"])


class AccountRead(BaseModel):
    """Stored account as returned by the API.

    The password is echoed back, matching the behaviour existing
    clients rely on.
    """

    account_id: int
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }
