"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Handlers call
these classes instead of touching SQLite directly, and every write of a
service record goes through the priority rules in ``core.priority``.
"""
