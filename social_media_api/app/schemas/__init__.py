"""
Pydantic schema definitions for API payloads.

Accounts and messages each define their own request and response
models.  Schemas are separated from the SQL in ``repositories`` to
decouple the API representation from persistence.
"""
