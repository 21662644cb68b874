"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and calls
the repositories for persistence.  API handlers only talk to services.
"""
