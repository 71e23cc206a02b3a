"""
Recurring plan -> job generation
Materializes upcoming jobs for ACTIVE service plans within a rolling window.
Safe to re-run at any time: the (plan, scheduled start) unique constraint
turns repeated occurrences into no-ops.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ..config import JOB_GENERATION_DEFAULT_DAYS, JOB_GENERATION_MAX_DAYS
from ..domain.errors import DuplicateJobError, PlanNotFoundError
from ..domain.jobs.repository import JobRepository
from ..domain.plans.repository import ServicePlanRepository
from ..models_job import Job, ServicePlan
from .business_time import to_business_local_time, utcnow
from .occurrences import compute_occurrences

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    created: int = 0
    plans_processed: int = 0
    plans_failed: int = 0
    window_end: Optional[datetime] = None


def clamp_days_ahead(days_ahead: Optional[int]) -> int:
    """Default to 14 days, clamp anything else into [1, 60]"""
    if days_ahead is None:
        return JOB_GENERATION_DEFAULT_DAYS
    return max(1, min(JOB_GENERATION_MAX_DAYS, int(days_ahead)))


def generation_window_start(plan: ServicePlan, now: datetime) -> datetime:
    """Resume after the watermark (or the plan start), never earlier than now"""
    if plan.last_generated_at and plan.last_generated_at > plan.start_date:
        anchor = plan.last_generated_at
    else:
        anchor = plan.start_date
    return anchor if anchor > now else now


def materialize_job(db: Session, plan: ServicePlan, scheduled_start: datetime) -> bool:
    """
    Create the job for one plan occurrence.

    Returns:
        True if a job was created, False if it already existed
    """
    job = Job(
        client_id=plan.client_id,
        address_id=plan.address_id,
        service_plan_id=plan.id,
        title=plan.title,
        notes=plan.notes,
        status="SCHEDULED",
        scheduled_start=scheduled_start,
        estimated_price_cents=plan.price_per_visit_cents,
    )

    try:
        JobRepository.create_plan_job(db, job)
    except DuplicateJobError:
        logger.debug(f"Job already generated for plan {plan.id} at {scheduled_start}")
        return False

    return True


def generate_jobs_for_plan(
    db: Session, plan: ServicePlan, now: datetime, window_end: datetime
) -> int:
    """
    Run one plan's generation pass and advance its watermark.
    Does not commit; returns the number of jobs created.
    """
    window_start = generation_window_start(plan, now)
    end_day = plan.end_date.date() if plan.end_date else None
    watermark = plan.last_generated_at

    created = 0
    for occurrence in compute_occurrences(
        plan.frequency,
        plan.start_date,
        window_start,
        window_end,
        day_of_week=plan.day_of_week,
        day_of_month=plan.day_of_month,
    ):
        if end_day and occurrence >= end_day:
            break

        scheduled_start = to_business_local_time(occurrence)
        # The window starts on the watermark's date; visits up to it were already generated
        if watermark and scheduled_start <= watermark:
            continue

        if materialize_job(db, plan, scheduled_start):
            created += 1

    ServicePlanRepository.advance_watermark(db, plan, window_end)
    return created


def generate_upcoming_jobs(
    db: Session,
    plan_id: Optional[int] = None,
    days_ahead: Optional[int] = None,
    now: Optional[datetime] = None,
) -> GenerationResult:
    """
    Generate upcoming jobs for all ACTIVE plans (or a single plan).

    Each plan is its own transaction: a failure rolls that plan back (watermark
    included) and the run continues with the next plan.

    Raises:
        PlanNotFoundError: plan_id given but no such plan exists
    """
    days = clamp_days_ahead(days_ahead)
    now = now or utcnow()
    window_end = now + timedelta(days=days)

    if plan_id is not None and ServicePlanRepository.get_plan_by_id(db, plan_id) is None:
        raise PlanNotFoundError(plan_id)

    plans = ServicePlanRepository.get_active_plans(db, plan_id)
    result = GenerationResult(window_end=window_end)

    if not plans:
        logger.info("ℹ️ No active plans to generate")
        return result

    logger.info(f"🔄 Generating jobs for {len(plans)} plan(s) through {window_end.isoformat()}")

    for plan in plans:
        current_plan_id = plan.id
        try:
            created = generate_jobs_for_plan(db, plan, now, window_end)
            db.commit()
        except Exception as e:
            db.rollback()
            result.plans_failed += 1
            logger.exception(f"❌ Job generation failed for plan {current_plan_id}: {e}")
            continue

        result.created += created
        result.plans_processed += 1
        if created:
            logger.info(f"✅ Plan {current_plan_id}: created {created} job(s)")

    logger.info(
        f"📊 Job generation complete: created={result.created}, "
        f"plans={result.plans_processed}, failed={result.plans_failed}"
    )
    return result
