"""
Pydantic schema definitions for API payloads.

Clients, service records and dashboard statistics each define their
own Pydantic models for request and response bodies.  Schemas are
separated from database rows to decouple API representation from
persistence.
"""
