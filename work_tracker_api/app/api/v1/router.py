"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (clients, services,
priority preview, statistics).  When new domains are introduced, update
this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import clients, services, priority, statistics

router = APIRouter()

router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(priority.router, prefix="/priority", tags=["priority"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
