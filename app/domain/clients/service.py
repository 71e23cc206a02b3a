"""Client service - Business logic for client operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Address, Client
from .repository import ClientRepository
from .schemas import AddressCreate, ClientCreate

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def get_clients(self, search: Optional[str] = None) -> list[Client]:
        """Get all clients"""
        return self.repo.get_clients(self.db, (search or "").strip() or None)

    def get_client(self, client_id: int) -> Client:
        """Get a specific client"""
        client = self.repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def create_client(self, data: ClientCreate) -> Client:
        """Create a new client"""
        client = self.repo.create_client(
            self.db,
            name=data.name,
            email=data.email,
            phone=data.phone,
            notes=(data.notes or "").strip() or None,
        )
        logger.info(f"✅ Client {client.id} created")
        return client

    def add_address(self, client_id: int, data: AddressCreate) -> Address:
        """Add a service address to a client"""
        client = self.get_client(client_id)
        return self.repo.add_address(self.db, client, **data.model_dump())
