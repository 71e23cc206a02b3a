"""Job service - Business logic for job operations"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Address, Client
from ...models_job import Job
from ...shared.validators import dollars_to_cents
from .repository import JobRepository
from .schemas import JobCreate, JobUpdate

logger = logging.getLogger(__name__)


class JobService:
    """Service layer for job business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = JobRepository()

    def list_jobs(
        self,
        plan_id: Optional[int] = None,
        client_id: Optional[int] = None,
        status: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Job]:
        status = (status or "").strip().upper() or None
        return self.repo.list_jobs(
            self.db, plan_id=plan_id, client_id=client_id, status=status, start=start, end=end
        )

    def get_job(self, job_id: int) -> Job:
        job = self.repo.get_job_by_id(self.db, job_id)
        if not job:
            raise HTTPException(status_code=404, detail="Job not found")
        return job

    def create_job(self, data: JobCreate) -> Job:
        """Create a manual (one-off) job"""
        client = self.db.query(Client).filter(Client.id == data.clientId).first()
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")

        self._check_address(client.id, data.addressId)
        self._check_schedule(data.scheduledStart, data.scheduledEnd)

        job = self.repo.create_job(
            self.db,
            client_id=client.id,
            address_id=data.addressId,
            title=data.title,
            notes=(data.notes or "").strip() or None,
            status="SCHEDULED" if data.scheduledStart else "DRAFT",
            scheduled_start=data.scheduledStart,
            scheduled_end=data.scheduledEnd,
            estimated_price_cents=dollars_to_cents(data.estimatedPrice),
        )
        logger.info(f"✅ Job {job.id} created for client {client.id} (status={job.status})")
        return job

    def update_job(self, job_id: int, data: JobUpdate) -> Job:
        """Update a job's provided fields"""
        job = self.get_job(job_id)

        updates = {}
        if data.title is not None:
            updates["title"] = data.title
        if data.notes is not None:
            updates["notes"] = data.notes.strip() or None
        if data.status is not None:
            updates["status"] = data.status
        if data.addressId is not None:
            self._check_address(job.client_id, data.addressId)
            updates["address_id"] = data.addressId
        if data.scheduledStart is not None:
            updates["scheduled_start"] = data.scheduledStart
        if data.scheduledEnd is not None:
            updates["scheduled_end"] = data.scheduledEnd
        if data.estimatedPrice is not None:
            updates["estimated_price_cents"] = dollars_to_cents(data.estimatedPrice)
        if data.actualPrice is not None:
            updates["actual_price_cents"] = dollars_to_cents(data.actualPrice)

        self._check_schedule(
            updates.get("scheduled_start", job.scheduled_start),
            updates.get("scheduled_end", job.scheduled_end),
        )

        try:
            return self.repo.update_job(self.db, job, **updates)
        except IntegrityError:
            # uq_jobs_plan_scheduled_start: the plan already has a job at that slot
            self.db.rollback()
            logger.warning(f"⚠️ Job {job_id} reschedule collides with another job of its plan")
            raise HTTPException(
                status_code=409, detail="A job for this plan is already scheduled at that time."
            )

    def _check_address(self, client_id: int, address_id: Optional[int]) -> None:
        if address_id is None:
            return
        address = (
            self.db.query(Address)
            .filter(Address.id == address_id, Address.client_id == client_id)
            .first()
        )
        if not address:
            raise HTTPException(status_code=400, detail="Address does not belong to client.")

    @staticmethod
    def _check_schedule(start: Optional[datetime], end: Optional[datetime]) -> None:
        if start and end and end < start:
            raise HTTPException(status_code=400, detail="Scheduled end must be after start.")
