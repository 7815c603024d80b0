"""
Pydantic models for service records.

A service record is one piece of work performed for a client, with a
submission deadline and a priority.  ``ServiceRecordCreate`` is used
for requests, ``ServiceRecordRead`` for responses and
``ServiceRecordUpdate`` for partial edits.  Read models carry a few
fields derived from the deadline (days remaining, whether the priority
may still be changed) so that clients never re‑implement the priority
rules themselves.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from work_tracker_api.app.core.priority import Priority


class ServiceStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ServiceType(str, Enum):
    BRANDING = "Branding"
    WEB_DEVELOPMENT = "Web Development"
    SEO = "SEO"
    SMM = "SMM"
    GOOGLE_ADS = "Google Ads"
    META_ADS = "Meta Ads"


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class ServiceEntry(BaseModel):
    """One service selected on the client intake form."""

    service_name: ServiceType = Field(..., examples=["SEO"])
    work_name: str = Field(..., examples=["Quarterly keyword audit"])
    submission_date: date = Field(..., examples=["2024-06-20"])
    priority: Priority = Priority.MEDIUM

    @field_validator("work_name")
    @classmethod
    def work_name_not_blank(cls, value: str) -> str:
        return _strip_required(value)


class ServiceRecordCreate(ServiceEntry):
    """Schema for creating a service record for an existing client."""

    client_id: str
    status: ServiceStatus = ServiceStatus.ACTIVE


class ServiceRecordRead(BaseModel):
    """Schema for reading a service record from the API."""

    id: int
    client_id: str
    client_name: str
    service_name: ServiceType
    work_name: str
    submission_date: date
    priority: Priority
    status: ServiceStatus
    created_at: str

    # Derived from submission_date and the request's reference date.
    days_until: int
    days_until_text: str
    priority_editable: bool
    suggested_priority: Priority
    submission_date_display: str

    model_config = {
        "from_attributes": True,
    }


class ServiceRecordUpdate(BaseModel):
    """Schema for updating a service record.

    All fields are optional; only provided fields will be updated.  When
    ``submission_date`` or ``priority`` is provided the stored priority
    is recomputed with the forcing rule.
    """

    work_name: Optional[str] = None
    submission_date: Optional[date] = None
    priority: Optional[Priority] = None
    status: Optional[ServiceStatus] = None

    @field_validator("work_name")
    @classmethod
    def work_name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _strip_required(value)


class ServiceRecordGroup(BaseModel):
    """Service records of one client, in display order."""

    client_name: str
    services: List[ServiceRecordRead]


class PriorityPreview(BaseModel):
    """Result of applying the priority rules to a prospective deadline."""

    submission_date: date
    days_until: int
    days_until_text: str
    suggested_priority: Priority
    priority_editable: bool
    effective_priority: Priority
