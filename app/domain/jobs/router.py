"""Job router - FastAPI endpoints for scheduled jobs"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...shared.validators import to_naive_utc
from .schemas import JobCreate, JobResponse, JobUpdate
from .service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"], dependencies=[Depends(require_admin)])


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    """Dependency injection for JobService"""
    return JobService(db)


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    plan_id: Optional[int] = Query(None, alias="planId"),
    client_id: Optional[int] = Query(None, alias="clientId"),
    status: Optional[str] = Query(None),
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    service: JobService = Depends(get_job_service),
):
    """List jobs by scheduled start with optional filters"""
    jobs = service.list_jobs(
        plan_id=plan_id,
        client_id=client_id,
        status=status,
        start=to_naive_utc(start),
        end=to_naive_utc(end),
    )
    return [JobResponse.from_job(j) for j in jobs]


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, service: JobService = Depends(get_job_service)):
    """Get a specific job"""
    return JobResponse.from_job(service.get_job(job_id))


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(data: JobCreate, service: JobService = Depends(get_job_service)):
    """Create a one-off job"""
    return JobResponse.from_job(service.create_job(data))


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int, data: JobUpdate, service: JobService = Depends(get_job_service)
):
    """Update a job"""
    return JobResponse.from_job(service.update_job(job_id, data))
