"""Service plan router - FastAPI endpoints for recurring service plans"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ..errors import PlanNotFoundError
from ..jobs.schemas import JobResponse
from .schemas import (
    GenerateJobsRequest,
    GenerateJobsResponse,
    ServicePlanCreate,
    ServicePlanDetailResponse,
    ServicePlanResponse,
    ServicePlanStatusUpdate,
    ServicePlanUpdate,
)
from .service import ServicePlanService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["Service Plans"], dependencies=[Depends(require_admin)])


def get_plan_service(db: Session = Depends(get_db)) -> ServicePlanService:
    """Dependency injection for ServicePlanService"""
    return ServicePlanService(db)


# ============================================================================
# JOB GENERATION
# ============================================================================


@router.post("/generate-jobs", response_model=GenerateJobsResponse)
async def generate_jobs(
    data: GenerateJobsRequest,
    service: ServicePlanService = Depends(get_plan_service),
):
    """
    Generate upcoming jobs for all ACTIVE plans (or a single plan).
    Safe to run repeatedly; already generated visits are skipped.
    """
    try:
        result = service.generate_jobs(plan_id=data.planId, days_ahead=data.daysAhead)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Service plan not found")
    except Exception as e:
        logger.exception(f"❌ Job generation could not run: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate jobs.")

    if result.plans_processed == 0 and result.plans_failed == 0:
        message = "No active plans to generate."
    else:
        message = f"Generated jobs. Created {result.created}."

    return GenerateJobsResponse(createdCount=result.created, message=message)


# ============================================================================
# CORE CRUD OPERATIONS
# ============================================================================


@router.get("", response_model=list[ServicePlanResponse])
async def list_plans(
    status: Optional[str] = Query(None),
    frequency: Optional[str] = Query(None),
    search: Optional[str] = Query(None, alias="q"),
    service: ServicePlanService = Depends(get_plan_service),
):
    """List service plans (max 200), ACTIVE first then most recently updated"""
    plans = service.list_plans(status=status, frequency=frequency, search=search)
    return [ServicePlanResponse.from_plan(p) for p in plans]


@router.get("/{plan_id}", response_model=ServicePlanDetailResponse)
async def get_plan(
    plan_id: int,
    service: ServicePlanService = Depends(get_plan_service),
):
    """Get a service plan with its upcoming jobs"""
    plan = service.get_plan(plan_id)
    upcoming = service.get_upcoming_jobs(plan)
    return ServicePlanDetailResponse(
        **ServicePlanResponse.from_plan(plan).model_dump(),
        upcomingJobs=[JobResponse.from_job(j) for j in upcoming],
    )


@router.post("", response_model=ServicePlanResponse, status_code=201)
async def create_plan(
    data: ServicePlanCreate,
    service: ServicePlanService = Depends(get_plan_service),
):
    """Create a service plan"""
    plan = service.create_plan(data)
    return ServicePlanResponse.from_plan(plan)


@router.put("/{plan_id}", response_model=ServicePlanResponse)
async def update_plan(
    plan_id: int,
    data: ServicePlanUpdate,
    service: ServicePlanService = Depends(get_plan_service),
):
    """Save a service plan"""
    plan = service.update_plan(plan_id, data)
    return ServicePlanResponse.from_plan(plan)


@router.post("/{plan_id}/status", response_model=ServicePlanResponse)
async def set_plan_status(
    plan_id: int,
    data: ServicePlanStatusUpdate,
    service: ServicePlanService = Depends(get_plan_service),
):
    """Pause, resume or cancel a service plan"""
    plan = service.set_status(plan_id, data.status)
    return ServicePlanResponse.from_plan(plan)
