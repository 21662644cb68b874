"""
Application package.

``core`` holds configuration, logging and database setup,
``repositories`` the SQL, ``services`` the business rules and ``api``
the FastAPI routers.
"""

from .main import app  # noqa: F401
