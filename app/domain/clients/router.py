"""Client router - FastAPI endpoints for client operations"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from .schemas import AddressCreate, AddressResponse, ClientCreate, ClientResponse
from .service import ClientService

router = APIRouter(prefix="/clients", tags=["Clients"], dependencies=[Depends(require_admin)])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


@router.get("", response_model=list[ClientResponse])
async def get_clients(
    search: Optional[str] = Query(None, alias="q"),
    service: ClientService = Depends(get_client_service),
):
    """Get all clients, newest first"""
    return [ClientResponse.model_validate(c) for c in service.get_clients(search)]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
):
    """Get a specific client with addresses"""
    return ClientResponse.model_validate(service.get_client(client_id))


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
):
    """Create a new client"""
    return ClientResponse.model_validate(service.create_client(data))


@router.post("/{client_id}/addresses", response_model=AddressResponse, status_code=201)
async def add_address(
    client_id: int,
    data: AddressCreate,
    service: ClientService = Depends(get_client_service),
):
    """Add a service address to a client"""
    return AddressResponse.model_validate(service.add_address(client_id, data))
