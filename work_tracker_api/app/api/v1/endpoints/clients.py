"""
Client endpoints for API v1.

Clients are registered from the intake form together with the services
being performed for them.  Priorities of those services are resolved
server‑side; a deadline fewer than eight days away always yields
``High``.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from work_tracker_api.app.api.dependencies import get_today
from work_tracker_api.app.schemas.client import ClientCreate, ClientRead, ClientWithServices
from work_tracker_api.app.services.client_service import ClientService


router = APIRouter()


@router.post("/", response_model=ClientWithServices, status_code=status.HTTP_201_CREATED)
async def create_client(
    client: ClientCreate,
    response: Response,
    today: date = Depends(get_today),
) -> ClientWithServices:
    """Create a client and, optionally, its services.

    If a client with the given ``id`` already exists it is returned
    unchanged with status 200 and no services are added.
    """
    created_client, created = await ClientService.create_client(client, today)
    if not created:
        response.status_code = status.HTTP_200_OK
    return created_client


@router.get("/", response_model=List[ClientRead])
async def list_clients() -> List[ClientRead]:
    """List all clients in the order they were registered."""
    return await ClientService.list_clients()


@router.get("/{client_id}", response_model=ClientWithServices)
async def get_client(client_id: str, today: date = Depends(get_today)) -> ClientWithServices:
    """Retrieve a client together with its services in display order."""
    try:
        return await ClientService.get_client(client_id, today)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: str) -> None:
    """Delete a client and every service record it owns."""
    try:
        await ClientService.delete_client(client_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
