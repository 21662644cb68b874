"""
Endpoint modules.

Each module defines an APIRouter for one domain (accounts, messages).
The routers are aggregated in ``api/router.py``.
"""
