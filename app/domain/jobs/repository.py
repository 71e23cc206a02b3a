"""Job repository - Database operations for jobs"""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models_job import Job
from ..errors import DuplicateJobError


class JobRepository:
    """Repository for job database operations"""

    @staticmethod
    def job_exists(db: Session, plan_id: int, scheduled_start: datetime) -> bool:
        """Check whether a plan already has a job at this scheduled start"""
        return (
            db.query(Job.id)
            .filter(Job.service_plan_id == plan_id, Job.scheduled_start == scheduled_start)
            .first()
            is not None
        )

    @staticmethod
    def create_plan_job(db: Session, job: Job) -> Job:
        """
        Insert a plan-generated job inside a savepoint.
        Does not commit; the caller owns the surrounding transaction.

        Raises:
            DuplicateJobError: (service_plan_id, scheduled_start) already taken,
                either before the insert or by a concurrent run during it
        """
        if JobRepository.job_exists(db, job.service_plan_id, job.scheduled_start):
            raise DuplicateJobError(job.service_plan_id, job.scheduled_start)

        try:
            with db.begin_nested():
                db.add(job)
                db.flush()
        except IntegrityError:
            if JobRepository.job_exists(db, job.service_plan_id, job.scheduled_start):
                raise DuplicateJobError(job.service_plan_id, job.scheduled_start) from None
            raise

        return job

    @staticmethod
    def get_job_by_id(db: Session, job_id: int) -> Optional[Job]:
        """Get a specific job by ID"""
        return db.query(Job).filter(Job.id == job_id).first()

    @staticmethod
    def list_jobs(
        db: Session,
        plan_id: Optional[int] = None,
        client_id: Optional[int] = None,
        status: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 200,
    ) -> list[Job]:
        """List jobs ordered by scheduled start with optional filters"""
        query = db.query(Job)

        if plan_id is not None:
            query = query.filter(Job.service_plan_id == plan_id)
        if client_id is not None:
            query = query.filter(Job.client_id == client_id)
        if status:
            query = query.filter(Job.status == status)
        if start:
            query = query.filter(Job.scheduled_start >= start)
        if end:
            query = query.filter(Job.scheduled_start <= end)

        return query.order_by(Job.scheduled_start.asc(), Job.id.asc()).limit(limit).all()

    @staticmethod
    def create_job(db: Session, **job_data) -> Job:
        """Create a manual job"""
        job = Job(**job_data)
        db.add(job)
        db.commit()
        db.refresh(job)
        return job

    @staticmethod
    def update_job(db: Session, job: Job, **updates) -> Job:
        """Update a job with provided fields"""
        for key, value in updates.items():
            if hasattr(job, key):
                setattr(job, key, value)

        db.commit()
        db.refresh(job)
        return job
