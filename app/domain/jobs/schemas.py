"""Job domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models_job import JOB_STATUSES
from ...shared.validators import to_naive_utc


def _validate_price(v):
    if v is not None and v < 0:
        raise ValueError("Price cannot be negative.")
    return v


class JobCreate(BaseModel):
    """Schema for creating a manual job"""

    clientId: int
    addressId: Optional[int] = None
    title: str
    notes: Optional[str] = None
    scheduledStart: Optional[datetime] = None
    scheduledEnd: Optional[datetime] = None
    estimatedPrice: Optional[float] = None  # dollars

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Job title is required.")
        return v

    @field_validator("scheduledStart", "scheduledEnd")
    @classmethod
    def validate_schedule(cls, v):
        return to_naive_utc(v)

    @field_validator("estimatedPrice")
    @classmethod
    def validate_estimated_price(cls, v):
        return _validate_price(v)


class JobUpdate(BaseModel):
    """Schema for updating a job (only provided fields change)"""

    title: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    addressId: Optional[int] = None
    scheduledStart: Optional[datetime] = None
    scheduledEnd: Optional[datetime] = None
    estimatedPrice: Optional[float] = None
    actualPrice: Optional[float] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Job title is required.")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        if v is not None:
            v = v.strip().upper()
            if v not in JOB_STATUSES:
                raise ValueError("Invalid status.")
        return v

    @field_validator("scheduledStart", "scheduledEnd")
    @classmethod
    def validate_schedule(cls, v):
        return to_naive_utc(v)

    @field_validator("estimatedPrice", "actualPrice")
    @classmethod
    def validate_prices(cls, v):
        return _validate_price(v)


class JobResponse(BaseModel):
    """Schema for job response"""

    id: int
    clientId: int
    addressId: Optional[int]
    servicePlanId: Optional[int]
    title: str
    notes: Optional[str]
    status: str
    scheduledStart: Optional[datetime]
    scheduledEnd: Optional[datetime]
    estimatedPriceCents: Optional[int]
    actualPriceCents: Optional[int]
    created_at: Optional[datetime] = None

    @classmethod
    def from_job(cls, job) -> "JobResponse":
        return cls(
            id=job.id,
            clientId=job.client_id,
            addressId=job.address_id,
            servicePlanId=job.service_plan_id,
            title=job.title,
            notes=job.notes,
            status=job.status,
            scheduledStart=job.scheduled_start,
            scheduledEnd=job.scheduled_end,
            estimatedPriceCents=job.estimated_price_cents,
            actualPriceCents=job.actual_price_cents,
            created_at=job.created_at,
        )
