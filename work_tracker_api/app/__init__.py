"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Clients and the service records performed for them each
have their own schemas, service class and router under
``api/v1/endpoints``.  The deadline/priority policy shared by all of
them lives in ``core.priority``.
"""

from .main import app  # noqa: F401
