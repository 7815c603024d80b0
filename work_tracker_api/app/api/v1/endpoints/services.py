"""
Service record endpoints for API v1.

These routes back the dashboard: a filtered list ordered by priority
and deadline, a grouped view per client, and edits that re‑apply the
priority forcing rule whenever the deadline or priority changes.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from work_tracker_api.app.api.dependencies import get_today
from work_tracker_api.app.core.priority import Priority
from work_tracker_api.app.schemas.service_record import (
    ServiceRecordCreate,
    ServiceRecordGroup,
    ServiceRecordRead,
    ServiceRecordUpdate,
    ServiceStatus,
)
from work_tracker_api.app.services.service_record_service import ServiceRecordService


router = APIRouter()


def _filters(
    priority: Optional[Priority] = Query(None, description="Only records with this priority."),
    status: Optional[ServiceStatus] = Query(None, description="Only records with this status."),
    client_id: Optional[str] = Query(None, description="Only records of this client."),
    client_name: Optional[str] = Query(None, description="Only records of clients with this name."),
) -> dict:
    return {
        "priority": priority.value if priority else None,
        "status": status.value if status else None,
        "client_id": client_id,
        "client_name": client_name,
    }


@router.post("/", response_model=ServiceRecordRead, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceRecordCreate,
    today: date = Depends(get_today),
) -> ServiceRecordRead:
    """Create a service record for an existing client.

    The stored priority is ``High`` whenever the deadline is fewer than
    eight days away, regardless of the requested priority.
    """
    try:
        return await ServiceRecordService.create_service(service, today)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/", response_model=List[ServiceRecordRead])
async def list_services(
    filters: dict = Depends(_filters),
    today: date = Depends(get_today),
) -> List[ServiceRecordRead]:
    """List service records.

    - **priority**, **status**, **client_id**, **client_name**: optional filters.

    Results are ordered High, then Medium, then Low, and then by the earliest
    submission date.
    """
    return await ServiceRecordService.list_services(today, **filters)


@router.get("/grouped", response_model=List[ServiceRecordGroup])
async def list_services_grouped(
    filters: dict = Depends(_filters),
    today: date = Depends(get_today),
) -> List[ServiceRecordGroup]:
    """List the same records as ``GET /services/`` grouped by client name."""
    return await ServiceRecordService.list_grouped_by_client(today, **filters)


@router.get("/client-names", response_model=List[str])
async def list_client_names() -> List[str]:
    """Distinct client names across all records, for the client filter."""
    return await ServiceRecordService.list_client_names()


@router.get("/{service_id}", response_model=ServiceRecordRead)
async def get_service(service_id: int, today: date = Depends(get_today)) -> ServiceRecordRead:
    """Retrieve a single service record by its ID."""
    try:
        return await ServiceRecordService.get_service(service_id, today)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{service_id}", response_model=ServiceRecordRead)
async def update_service(
    service_id: int,
    updates: ServiceRecordUpdate,
    today: date = Depends(get_today),
) -> ServiceRecordRead:
    """Update an existing service record.

    Partial updates are supported; unspecified fields remain unchanged.
    Setting the submission date or the priority re‑applies the forcing
    rule.
    """
    update_dict = updates.model_dump(exclude_none=True)
    try:
        return await ServiceRecordService.update_service(service_id, update_dict, today)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: int) -> None:
    """Delete a service record."""
    try:
        await ServiceRecordService.delete_service(service_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
