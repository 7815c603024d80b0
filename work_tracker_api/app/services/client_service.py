"""
Business logic for clients.

Clients are created from the intake form together with the services
being performed for them.  Creation is idempotent on the client id:
posting a client whose id already exists returns the stored client with
its current services and adds nothing.  Deleting a client removes every
service record it owns.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import List, Tuple

from work_tracker_api.app.core.db import get_connection
from work_tracker_api.app.schemas.client import ClientCreate, ClientRead, ClientWithServices
from work_tracker_api.app.schemas.service_record import ServiceStatus
from work_tracker_api.app.services.service_record_service import ServiceRecordService


logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing clients."""

    @classmethod
    async def create_client(cls, data: ClientCreate, today: date) -> Tuple[ClientWithServices, bool]:
        """Create a client and its initial services.

        Returns a tuple ``(client, created)``.  ``created`` is ``False``
        when a client with the same id already existed, in which case
        the request's services are ignored.  All inserts happen in one
        transaction.
        """
        client_id = data.id or str(uuid.uuid4())
        conn = get_connection()
        try:
            cursor = conn.cursor()
            existing = cursor.execute(
                "SELECT id, name, created_at FROM clients WHERE id = ?", (client_id,)
            ).fetchone()
            if existing:
                logger.info("Client %s already exists, returning it unchanged", client_id)
                client = dict(existing)
            else:
                client = {
                    "id": client_id,
                    "name": data.name,
                    "created_at": datetime.utcnow().isoformat(),
                }
                cursor.execute(
                    "INSERT INTO clients (id, name, created_at) VALUES (:id, :name, :created_at)",
                    client,
                )
                service_ids: List[int] = []
                for entry in data.services:
                    service_ids.append(
                        ServiceRecordService.insert(
                            cursor, client_id, data.name, entry, ServiceStatus.ACTIVE.value, today
                        )
                    )
                conn.commit()
                logger.info(
                    "Created client %s ('%s') with %d service(s)", client_id, data.name, len(service_ids)
                )
        finally:
            conn.close()

        # An existing client comes back with the services it already has.
        services = await ServiceRecordService.list_services(today, client_id=client_id)
        return ClientWithServices(**client, services=services), existing is None

    @classmethod
    async def list_clients(cls) -> List[ClientRead]:
        """Return all clients ordered by creation time."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, created_at FROM clients ORDER BY created_at ASC, rowid ASC"
            ).fetchall()
            return [ClientRead(**dict(row)) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_client(cls, client_id: str, today: date) -> ClientWithServices:
        """Retrieve a client with its services in display order.

        Raises ``ValueError`` if the client does not exist.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, created_at FROM clients WHERE id = ?", (client_id,)
            ).fetchone()
            if not row:
                raise ValueError(f"Client {client_id} not found")
        finally:
            conn.close()
        services = await ServiceRecordService.list_services(today, client_id=client_id)
        return ClientWithServices(**dict(row), services=services)

    @classmethod
    async def delete_client(cls, client_id: str) -> int:
        """Delete a client and all of its service records.

        Returns the number of service records removed.  Raises
        ``ValueError`` if the client does not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            exists = cursor.execute("SELECT id FROM clients WHERE id = ?", (client_id,)).fetchone()
            if not exists:
                raise ValueError(f"Client {client_id} not found")
            removed = cursor.execute("DELETE FROM services WHERE client_id = ?", (client_id,)).rowcount
            cursor.execute("DELETE FROM clients WHERE id = ?", (client_id,))
            conn.commit()
            logger.info("Deleted client %s and %d service(s)", client_id, removed)
            return removed
        finally:
            conn.close()
