"""
API dependencies.

Handlers never call ``date.today()`` themselves; they receive the
reference date through ``get_today`` so the priority rules stay pure
and tests can pin the date with ``app.dependency_overrides``.
"""

from datetime import date


def get_today() -> date:
    """Return the server's current calendar date."""
    return date.today()
