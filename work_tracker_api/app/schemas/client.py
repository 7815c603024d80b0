"""
Pydantic models for clients.

A client is created from the intake form together with the services
being performed for it.  The ``id`` may be supplied by the caller (the
form generates a UUID up front) so that repeated submissions do not
create duplicates.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from work_tracker_api.app.schemas.service_record import ServiceEntry, ServiceRecordRead


class ClientCreate(BaseModel):
    """Schema for creating a client and, optionally, its services."""

    id: Optional[str] = Field(None, examples=["3f1c2a4e-9d7b-4c55-8a0e-0e7a4b1d2c3f"])
    name: str = Field(..., examples=["Acme Bakery"])
    services: List[ServiceEntry] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Client name is required")
        return value

    @field_validator("services")
    @classmethod
    def services_unique(cls, value: List[ServiceEntry]) -> List[ServiceEntry]:
        names = [entry.service_name for entry in value]
        if len(names) != len(set(names)):
            raise ValueError("Each service may only be selected once")
        return value


class ClientRead(BaseModel):
    """Schema for reading a client from the API."""

    id: str
    name: str
    created_at: str

    model_config = {
        "from_attributes": True,
    }


class ClientWithServices(ClientRead):
    """A client together with the service records created for it."""

    services: List[ServiceRecordRead] = Field(default_factory=list)
