"""Service plan service - Business logic for recurring service plans"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Address, Client
from ...models_job import PLAN_FREQUENCIES, PLAN_STATUSES, Job, ServicePlan
from ...services.business_time import utcnow
from ...services.job_generation import GenerationResult, generate_upcoming_jobs
from .repository import ServicePlanRepository
from .schemas import ServicePlanCreate, ServicePlanUpdate

logger = logging.getLogger(__name__)


class ServicePlanService:
    """Service layer for service plan business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServicePlanRepository()

    def list_plans(
        self,
        status: Optional[str] = None,
        frequency: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[ServicePlan]:
        """List plans; unknown status/frequency filters are ignored"""
        status = (status or "").strip().upper()
        frequency = (frequency or "").strip().upper()
        return self.repo.list_plans(
            self.db,
            status=status if status in PLAN_STATUSES else None,
            frequency=frequency if frequency in PLAN_FREQUENCIES else None,
            search=(search or "").strip() or None,
        )

    def get_plan(self, plan_id: int) -> ServicePlan:
        plan = self.repo.get_plan_by_id(self.db, plan_id)
        if not plan:
            raise HTTPException(status_code=404, detail="Service plan not found")
        return plan

    def get_upcoming_jobs(self, plan: ServicePlan) -> list[Job]:
        return self.repo.get_upcoming_jobs(self.db, plan.id, utcnow())

    def create_plan(self, data: ServicePlanCreate) -> ServicePlan:
        """Create a new service plan with validation"""
        client = self.db.query(Client).filter(Client.id == data.clientId).first()
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")

        fields = data.to_model_fields()
        self._validate_fields(client.id, fields)

        plan = self.repo.create_plan(self.db, client_id=client.id, **fields)
        logger.info(f"✅ Service plan {plan.id} created for client {client.id} ({plan.frequency})")
        return plan

    def update_plan(self, plan_id: int, data: ServicePlanUpdate) -> ServicePlan:
        """Replace a plan's editable fields"""
        plan = self.get_plan(plan_id)

        fields = data.to_model_fields()
        self._validate_fields(plan.client_id, fields)

        plan = self.repo.update_plan(self.db, plan, **fields)
        logger.info(f"✅ Service plan {plan.id} saved")
        return plan

    def set_status(self, plan_id: int, status: str) -> ServicePlan:
        """Set plan status (ACTIVE, PAUSED, CANCELED)"""
        plan = self.get_plan(plan_id)
        previous = plan.status
        plan = self.repo.update_plan(self.db, plan, status=status)
        logger.info(f"✅ Service plan {plan.id} transitioned: {previous} → {status}")
        return plan

    def generate_jobs(
        self, plan_id: Optional[int] = None, days_ahead: Optional[int] = None
    ) -> GenerationResult:
        return generate_upcoming_jobs(self.db, plan_id=plan_id, days_ahead=days_ahead)

    def _validate_fields(self, client_id: int, fields: dict) -> None:
        if fields["end_date"] and fields["end_date"] < fields["start_date"]:
            raise HTTPException(status_code=400, detail="End date must be after start date.")

        address_id = fields.get("address_id")
        if address_id is not None:
            address = (
                self.db.query(Address)
                .filter(Address.id == address_id, Address.client_id == client_id)
                .first()
            )
            if not address:
                raise HTTPException(status_code=400, detail="Address does not belong to client.")
