"""
Service layer for dashboard statistics.

All queries are read‑only and cover every service record regardless
of the filters applied on the dashboard.
"""

from __future__ import annotations

import logging
from datetime import date

from work_tracker_api.app.core.db import get_connection
from work_tracker_api.app.schemas.statistics import StatisticsOverview


logger = logging.getLogger(__name__)


class StatisticsService:
    """Service providing aggregated counters for the dashboard."""

    @classmethod
    async def overview(cls, today: date) -> StatisticsOverview:
        """Return counts by priority and status.

        ``overdue`` counts ``Active`` records whose submission date is
        before ``today``.  ``total_clients`` counts the distinct client
        names that appear on service records.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            priority_counts = {
                row["priority"]: row["total"]
                for row in cursor.execute(
                    "SELECT priority, COUNT(*) AS total FROM services GROUP BY priority"
                ).fetchall()
            }
            status_counts = {
                row["status"]: row["total"]
                for row in cursor.execute(
                    "SELECT status, COUNT(*) AS total FROM services GROUP BY status"
                ).fetchall()
            }
            # ISO dates compare correctly as text
            overdue = cursor.execute(
                "SELECT COUNT(*) FROM services WHERE status = 'Active' AND submission_date < ?",
                (today.isoformat(),),
            ).fetchone()[0]
            total_services = cursor.execute("SELECT COUNT(*) FROM services").fetchone()[0]
            total_clients = cursor.execute(
                "SELECT COUNT(DISTINCT client_name) FROM services"
            ).fetchone()[0]
        finally:
            conn.close()
        logger.debug("Computed statistics for %s", today.isoformat())
        return StatisticsOverview(
            high_priority=priority_counts.get("High", 0),
            medium_priority=priority_counts.get("Medium", 0),
            low_priority=priority_counts.get("Low", 0),
            active=status_counts.get("Active", 0),
            completed=status_counts.get("Completed", 0),
            on_hold=status_counts.get("On Hold", 0),
            overdue=overdue,
            total_services=total_services,
            total_clients=total_clients,
        )
