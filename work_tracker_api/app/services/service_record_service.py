"""
Business logic for service records.

``ServiceRecordService`` stores service records in SQLite and is the
only place that writes them.  Every create, and every update that sets
a deadline or a priority, goes through
:func:`~work_tracker_api.app.core.priority.resolve_effective_priority`
so that a record due in fewer than eight days is always stored as
``High`` no matter what the caller chose.

Listing applies the dashboard filters in SQL and then orders the
visible set in Python with
:func:`~work_tracker_api.app.core.priority.sort_for_display`, because
the priority rank is not a column.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from work_tracker_api.app.core import priority as rules
from work_tracker_api.app.core.db import get_connection
from work_tracker_api.app.schemas.service_record import (
    ServiceEntry,
    ServiceRecordCreate,
    ServiceRecordGroup,
    ServiceRecordRead,
)


logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, client_id, client_name, service_name, work_name, submission_date, "
    "priority, status, created_at"
)


class ServiceRecordService:
    """Service for creating, listing, editing and deleting service records."""

    @staticmethod
    def to_read(row: sqlite3.Row, today: date) -> ServiceRecordRead:
        """Build the API representation of a row, deriving deadline fields for ``today``."""
        submission_date = rules.to_date(row["submission_date"])
        days = rules.days_until(submission_date, today)
        return ServiceRecordRead(
            id=row["id"],
            client_id=row["client_id"],
            client_name=row["client_name"],
            service_name=row["service_name"],
            work_name=row["work_name"],
            submission_date=submission_date,
            priority=row["priority"],
            status=row["status"],
            created_at=row["created_at"],
            days_until=days,
            days_until_text=rules.days_until_text(days),
            priority_editable=rules.is_priority_editable(submission_date, today),
            suggested_priority=rules.suggested_priority(submission_date, today),
            submission_date_display=rules.format_date_for_display(submission_date),
        )

    @classmethod
    def insert(
        cls,
        cursor: sqlite3.Cursor,
        client_id: str,
        client_name: str,
        entry: ServiceEntry,
        status: str,
        today: date,
    ) -> int:
        """Insert one record on an open cursor and return its id.

        Shared with ``ClientService`` so that services created from the
        intake form obey the same forcing rule.  The caller commits.
        """
        effective = rules.resolve_effective_priority(entry.submission_date, entry.priority, today)
        if effective != entry.priority:
            logger.info(
                "Forcing priority of '%s' for client %s to %s (due %s)",
                entry.work_name,
                client_id,
                effective.value,
                entry.submission_date.isoformat(),
            )
        cursor.execute(
            """
            INSERT INTO services (client_id, client_name, service_name, work_name,
                                  submission_date, priority, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                client_id,
                client_name,
                entry.service_name.value,
                entry.work_name,
                entry.submission_date.isoformat(),
                effective.value,
                status,
                datetime.utcnow().isoformat(),
            ),
        )
        return cursor.lastrowid

    @classmethod
    async def create_service(cls, data: ServiceRecordCreate, today: date) -> ServiceRecordRead:
        """Create a service record for an existing client.

        Raises ``ValueError`` if the client does not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            client = cursor.execute(
                "SELECT id, name FROM clients WHERE id = ?", (data.client_id,)
            ).fetchone()
            if not client:
                raise ValueError(f"Client {data.client_id} not found")
            service_id = cls.insert(
                cursor, client["id"], client["name"], data, data.status.value, today
            )
            conn.commit()
            logger.info("Created service %s (%s) for client %s", service_id, data.service_name.value, client["id"])
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            return cls.to_read(row, today)
        finally:
            conn.close()

    @classmethod
    async def list_services(
        cls,
        today: date,
        priority: Optional[str] = None,
        status: Optional[str] = None,
        client_id: Optional[str] = None,
        client_name: Optional[str] = None,
    ) -> List[ServiceRecordRead]:
        """Return service records matching the filters, in display order.

        - ``priority``: ``High``, ``Medium`` or ``Low``.
        - ``status``: ``Active``, ``Completed`` or ``On Hold``.
        - ``client_id`` / ``client_name``: restrict to one client.

        Omitted filters match everything.  Rows are read in insertion
        order so that records tying on priority and deadline keep it.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            query = f"SELECT {_COLUMNS} FROM services"
            params: list = []
            where_clauses: list[str] = []
            if priority:
                where_clauses.append("priority = ?")
                params.append(priority)
            if status:
                where_clauses.append("status = ?")
                params.append(status)
            if client_id:
                where_clauses.append("client_id = ?")
                params.append(client_id)
            if client_name:
                where_clauses.append("client_name = ?")
                params.append(client_name)
            if where_clauses:
                query += " WHERE " + " AND ".join(where_clauses)
            query += " ORDER BY id ASC"
            rows = cursor.execute(query, tuple(params)).fetchall()
            return rules.sort_for_display(cls.to_read(row, today) for row in rows)
        finally:
            conn.close()

    @classmethod
    async def list_grouped_by_client(cls, today: date, **filters: Any) -> List[ServiceRecordGroup]:
        """Group the filtered, ordered records by client name.

        Groups appear in the order their first record appears in the
        display order, so the client with the most urgent work comes
        first.
        """
        services = await cls.list_services(today, **filters)
        groups: Dict[str, List[ServiceRecordRead]] = {}
        for service in services:
            groups.setdefault(service.client_name, []).append(service)
        return [ServiceRecordGroup(client_name=name, services=items) for name, items in groups.items()]

    @classmethod
    async def list_client_names(cls) -> List[str]:
        """Return the sorted, distinct client names across all records."""
        conn = get_connection()
        try:
            rows = conn.execute("SELECT DISTINCT client_name FROM services").fetchall()
            return sorted(row["client_name"] for row in rows)
        finally:
            conn.close()

    @classmethod
    async def get_service(cls, service_id: int, today: date) -> ServiceRecordRead:
        """Retrieve a single record.  Raises ``ValueError`` if it does not exist."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            if not row:
                raise ValueError(f"Service {service_id} not found")
            return cls.to_read(row, today)
        finally:
            conn.close()

    @classmethod
    async def update_service(cls, service_id: int, updates: dict, today: date) -> ServiceRecordRead:
        """Update fields of an existing record.

        ``updates`` may contain ``work_name``, ``submission_date``,
        ``priority`` and ``status``.  If it sets the deadline or the
        priority, the stored priority is recomputed from the resulting
        deadline and chosen priority.  Raises ``ValueError`` if the
        record does not exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            if not row:
                raise ValueError(f"Service {service_id} not found")

            values: Dict[str, Any] = {}
            for key in ("work_name", "submission_date", "priority", "status"):
                if updates.get(key) is not None:
                    values[key] = updates[key]

            if "submission_date" in values or "priority" in values:
                submission_date = values.get("submission_date", row["submission_date"])
                chosen = values.get("priority", row["priority"])
                effective = rules.resolve_effective_priority(submission_date, chosen, today)
                if effective != rules.Priority(chosen):
                    logger.info(
                        "Forcing priority of service %s to %s (due %s)",
                        service_id,
                        effective.value,
                        rules.to_date(submission_date).isoformat(),
                    )
                values["priority"] = effective

            if values:
                fields = []
                params = []
                for key, value in values.items():
                    fields.append(f"{key} = ?")
                    if isinstance(value, date):
                        params.append(value.isoformat())
                    elif hasattr(value, "value"):
                        params.append(value.value)
                    else:
                        params.append(value)
                params.append(datetime.utcnow().isoformat())
                params.append(service_id)
                cursor.execute(
                    f"UPDATE services SET {', '.join(fields)}, updated_at = ? WHERE id = ?",
                    tuple(params),
                )
                conn.commit()
                logger.info("Updated service %s: %s", service_id, ", ".join(values))

            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            return cls.to_read(row, today)
        finally:
            conn.close()

    @classmethod
    async def delete_service(cls, service_id: int) -> None:
        """Delete a record.  Raises ``ValueError`` if it does not exist."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            exists = cursor.execute("SELECT id FROM services WHERE id = ?", (service_id,)).fetchone()
            if not exists:
                raise ValueError(f"Service {service_id} not found")
            cursor.execute("DELETE FROM services WHERE id = ?", (service_id,))
            conn.commit()
            logger.info("Deleted service %s", service_id)
        finally:
            conn.close()
