"""
Recurring Service Plan and Job Models
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base

PLAN_FREQUENCIES = ("WEEKLY", "BIWEEKLY", "MONTHLY")
PLAN_STATUSES = ("ACTIVE", "PAUSED", "CANCELED")
JOB_STATUSES = ("DRAFT", "SCHEDULED", "IN_PROGRESS", "COMPLETED", "CANCELED")


class ServicePlan(Base):
    """Recurring service commitment for a client (e.g. weekly mowing)"""

    __tablename__ = "service_plans"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True)

    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)

    # Cadence
    frequency = Column(String(20), nullable=False)  # WEEKLY, BIWEEKLY, MONTHLY
    # Status workflow: ACTIVE <-> PAUSED <-> CANCELED (operator driven)
    # Only ACTIVE plans generate jobs
    status = Column(String(20), default="ACTIVE", nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=True)  # No visits on or after this date
    day_of_week = Column(Integer, nullable=True)  # 0=Sunday..6=Saturday (WEEKLY/BIWEEKLY)
    day_of_month = Column(Integer, nullable=True)  # 1..31 (MONTHLY)

    # Pricing (minor currency units)
    price_per_visit_cents = Column(Integer, nullable=True)

    # End of the window already materialized into jobs. Written only by job generation.
    last_generated_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="service_plans")
    address = relationship("Address")
    jobs = relationship("Job", back_populates="service_plan")


class Job(Base):
    """Scheduled unit of work, created manually or generated from a service plan"""

    __tablename__ = "jobs"
    __table_args__ = (
        # One job per plan occurrence; job generation relies on this for dedup
        UniqueConstraint("service_plan_id", "scheduled_start", name="uq_jobs_plan_scheduled_start"),
    )

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True)
    service_plan_id = Column(Integer, ForeignKey("service_plans.id"), nullable=True, index=True)

    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)

    # Status workflow: DRAFT -> SCHEDULED -> IN_PROGRESS -> COMPLETED (or CANCELED)
    status = Column(String(20), default="SCHEDULED", nullable=False, index=True)

    # Scheduling (naive UTC)
    scheduled_start = Column(DateTime, nullable=True, index=True)
    scheduled_end = Column(DateTime, nullable=True)

    # Pricing (minor currency units)
    estimated_price_cents = Column(Integer, nullable=True)
    actual_price_cents = Column(Integer, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="jobs")
    address = relationship("Address")
    service_plan = relationship("ServicePlan", back_populates="jobs")
