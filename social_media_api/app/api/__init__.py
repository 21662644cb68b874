"""
HTTP layer.

``router`` aggregates the endpoint modules in ``endpoints``; ``deps``
provides the services injected into them.
"""
