"""Service plan domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models_job import PLAN_FREQUENCIES, PLAN_STATUSES
from ...shared.validators import dollars_to_cents, to_naive_utc
from ..jobs.schemas import JobResponse


def _validate_frequency(v):
    v = v.strip().upper()
    if v not in PLAN_FREQUENCIES:
        raise ValueError("Invalid frequency.")
    return v


def _validate_status(v):
    v = v.strip().upper()
    if v not in PLAN_STATUSES:
        raise ValueError("Invalid status.")
    return v


class ServicePlanBase(BaseModel):
    title: str
    notes: Optional[str] = None
    frequency: str
    status: str = "ACTIVE"
    addressId: Optional[int] = None
    startDate: datetime
    endDate: Optional[datetime] = None
    dayOfWeek: Optional[int] = None
    dayOfMonth: Optional[int] = None
    pricePerVisit: Optional[float] = None  # dollars

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Title is required.")
        return v

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        if v is not None:
            v = v.strip()
        return v or None

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, v):
        return _validate_frequency(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return _validate_status(v)

    @field_validator("startDate", "endDate")
    @classmethod
    def validate_dates(cls, v):
        return to_naive_utc(v)

    @field_validator("dayOfWeek")
    @classmethod
    def validate_day_of_week(cls, v):
        if v is not None and not 0 <= v <= 6:
            raise ValueError("Day of week must be 0 (Sunday) to 6 (Saturday).")
        return v

    @field_validator("dayOfMonth")
    @classmethod
    def validate_day_of_month(cls, v):
        if v is not None and not 1 <= v <= 31:
            raise ValueError("Day of month must be between 1 and 31.")
        return v

    @field_validator("pricePerVisit")
    @classmethod
    def validate_price(cls, v):
        if v is not None and v < 0:
            raise ValueError("Price per visit cannot be negative.")
        return v

    def to_model_fields(self) -> dict:
        return {
            "title": self.title,
            "notes": self.notes,
            "frequency": self.frequency,
            "status": self.status,
            "address_id": self.addressId,
            "start_date": self.startDate,
            "end_date": self.endDate,
            "day_of_week": self.dayOfWeek,
            "day_of_month": self.dayOfMonth,
            "price_per_visit_cents": dollars_to_cents(self.pricePerVisit),
        }


class ServicePlanCreate(ServicePlanBase):
    """Schema for creating a service plan"""

    clientId: int


class ServicePlanUpdate(ServicePlanBase):
    """Schema for replacing a service plan's editable fields"""


class ServicePlanStatusUpdate(BaseModel):
    status: str

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return _validate_status(v)


class ServicePlanResponse(BaseModel):
    id: int
    clientId: int
    clientName: Optional[str] = None
    addressId: Optional[int]
    title: str
    notes: Optional[str]
    frequency: str
    status: str
    startDate: datetime
    endDate: Optional[datetime]
    dayOfWeek: Optional[int]
    dayOfMonth: Optional[int]
    pricePerVisitCents: Optional[int]
    lastGeneratedAt: Optional[datetime]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_plan(cls, plan) -> "ServicePlanResponse":
        return cls(
            id=plan.id,
            clientId=plan.client_id,
            clientName=plan.client.name if plan.client else None,
            addressId=plan.address_id,
            title=plan.title,
            notes=plan.notes,
            frequency=plan.frequency,
            status=plan.status,
            startDate=plan.start_date,
            endDate=plan.end_date,
            dayOfWeek=plan.day_of_week,
            dayOfMonth=plan.day_of_month,
            pricePerVisitCents=plan.price_per_visit_cents,
            lastGeneratedAt=plan.last_generated_at,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )


class ServicePlanDetailResponse(ServicePlanResponse):
    upcomingJobs: list[JobResponse] = []


class GenerateJobsRequest(BaseModel):
    """Trigger for recurring job generation"""

    planId: Optional[int] = None
    daysAhead: Optional[int] = None  # clamped to [1, 60], default 14


class GenerateJobsResponse(BaseModel):
    createdCount: int
    message: str
