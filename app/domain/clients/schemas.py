"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...shared.validators import validate_email, validate_us_phone


class ClientCreate(BaseModel):
    """Schema for creating a new client"""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        if v:
            return validate_email(v)
        return None

    @field_validator("phone")
    @classmethod
    def normalize_phone(cls, v):
        if v:
            return validate_us_phone(v)
        return None


class AddressCreate(BaseModel):
    """Schema for adding a service address to a client"""

    line1: str
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    @field_validator("line1")
    @classmethod
    def validate_line1(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Street address is required")
        return v


class AddressResponse(BaseModel):
    id: int
    line1: str
    line2: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class ClientResponse(BaseModel):
    """Schema for client response"""

    id: int
    public_id: Optional[str] = None
    name: str
    email: Optional[str]
    phone: Optional[str]
    notes: Optional[str]
    addresses: list[AddressResponse] = []
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
