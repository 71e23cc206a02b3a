"""Service plan repository - Database operations for recurring service plans"""

from datetime import datetime
from typing import Optional

from sqlalchemy import case
from sqlalchemy.orm import Session, joinedload

from ...models import Client
from ...models_job import Job, ServicePlan


class ServicePlanRepository:
    """Repository for service plan database operations"""

    @staticmethod
    def get_active_plans(db: Session, plan_id: Optional[int] = None) -> list[ServicePlan]:
        """Get ACTIVE plans eligible for job generation, optionally a single one"""
        query = db.query(ServicePlan).filter(ServicePlan.status == "ACTIVE")

        if plan_id is not None:
            query = query.filter(ServicePlan.id == plan_id)

        return query.order_by(ServicePlan.id.asc()).all()

    @staticmethod
    def get_plan_by_id(db: Session, plan_id: int) -> Optional[ServicePlan]:
        """Get a specific plan by ID"""
        return (
            db.query(ServicePlan)
            .options(joinedload(ServicePlan.client))
            .filter(ServicePlan.id == plan_id)
            .first()
        )

    @staticmethod
    def list_plans(
        db: Session,
        status: Optional[str] = None,
        frequency: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 200,
    ) -> list[ServicePlan]:
        """List plans with optional filters, ACTIVE first then most recently updated"""
        query = db.query(ServicePlan).join(Client, ServicePlan.client_id == Client.id)

        if status:
            query = query.filter(ServicePlan.status == status)
        if frequency:
            query = query.filter(ServicePlan.frequency == frequency)
        if search:
            search_term = f"%{search.lower()}%"
            query = query.filter(
                (ServicePlan.title.ilike(search_term))
                | (ServicePlan.notes.ilike(search_term))
                | (Client.name.ilike(search_term))
            )

        status_order = case(
            (ServicePlan.status == "ACTIVE", 0),
            (ServicePlan.status == "PAUSED", 1),
            else_=2,
        )
        return (
            query.order_by(status_order, ServicePlan.updated_at.desc(), ServicePlan.id.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_upcoming_jobs(db: Session, plan_id: int, now: datetime, limit: int = 20) -> list[Job]:
        """Get the next scheduled jobs generated from a plan"""
        return (
            db.query(Job)
            .filter(Job.service_plan_id == plan_id, Job.scheduled_start >= now)
            .order_by(Job.scheduled_start.asc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def create_plan(db: Session, **plan_data) -> ServicePlan:
        """Create a new service plan"""
        plan = ServicePlan(**plan_data)
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan

    @staticmethod
    def update_plan(db: Session, plan: ServicePlan, **updates) -> ServicePlan:
        """Update a plan with provided fields (None clears optional fields)"""
        for key, value in updates.items():
            if hasattr(plan, key):
                setattr(plan, key, value)

        db.commit()
        db.refresh(plan)
        return plan

    @staticmethod
    def advance_watermark(db: Session, plan: ServicePlan, window_end: datetime) -> None:
        """
        Record the end of the window materialized for this plan (caller commits).
        The watermark never moves backwards, e.g. after a shorter-horizon run.
        """
        if plan.last_generated_at is None or window_end > plan.last_generated_at:
            plan.last_generated_at = window_end
        db.flush()
