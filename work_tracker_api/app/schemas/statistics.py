"""
Pydantic models for dashboard statistics.
"""

from pydantic import BaseModel


class StatisticsOverview(BaseModel):
    """Dashboard counters over all service records.

    ``overdue`` counts active records whose deadline has passed;
    ``total_clients`` counts distinct client names among the records.
    """

    high_priority: int
    medium_priority: int
    low_priority: int
    active: int
    completed: int
    on_hold: int
    overdue: int
    total_services: int
    total_clients: int
