"""Client repository - Database operations for clients"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from ...models import Address, Client


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_clients(db: Session, search: Optional[str] = None) -> list[Client]:
        """Get all clients, newest first, optionally filtered by name/email/phone"""
        query = db.query(Client).options(selectinload(Client.addresses))

        if search:
            search_term = f"%{search.lower()}%"
            query = query.filter(
                (Client.name.ilike(search_term))
                | (Client.email.ilike(search_term))
                | (Client.phone.ilike(search_term))
            )

        return query.order_by(Client.created_at.desc(), Client.id.desc()).all()

    @staticmethod
    def get_client_by_id(db: Session, client_id: int) -> Optional[Client]:
        """Get a specific client by ID"""
        return (
            db.query(Client)
            .options(selectinload(Client.addresses))
            .filter(Client.id == client_id)
            .first()
        )

    @staticmethod
    def create_client(db: Session, **client_data) -> Client:
        """Create a new client"""
        client = Client(**client_data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def add_address(db: Session, client: Client, **address_data) -> Address:
        """Attach a service address to a client"""
        address = Address(client_id=client.id, **address_data)
        db.add(address)
        db.commit()
        db.refresh(address)
        return address
