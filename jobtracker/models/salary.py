from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobtracker.database import Base, JSONColumn
from jobtracker.models.enums import OfferStatus, SalaryChangeType, SalaryType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SalaryOffer(Base):
    """An offer received for a job. amount is integer cents."""

    __tablename__ = "salary_offers"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    application_id = Column(String, ForeignKey("applications.id", ondelete="SET NULL"), nullable=True)
    amount = Column(Integer, nullable=False)
    currency = Column(String, nullable=False, default="USD")
    type = Column(String, nullable=False, default=SalaryType.ANNUAL.value)
    status = Column(String, nullable=False, default=OfferStatus.PENDING.value)
    offered_at = Column(DateTime(timezone=True), default=_utcnow)
    expires_at = Column(DateTime(timezone=True))
    notes = Column(Text)
    benefits = Column(JSONColumn, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    job = relationship("Job", back_populates="offers")


class SalaryHistory(Base):
    """Compensation changes over time for a job. amount is integer cents."""

    __tablename__ = "salary_history"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    currency = Column(String, nullable=False, default="USD")
    type = Column(String, nullable=False, default=SalaryType.ANNUAL.value)
    effective_date = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    change_type = Column(String, nullable=False, default=SalaryChangeType.INITIAL.value)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship("Job", back_populates="salary_history")
