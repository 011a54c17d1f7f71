from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobtracker.database import Base, JSONColumn
from jobtracker.models.enums import JobStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    url = Column(String, nullable=False)
    source = Column(String)
    favicon_url = Column(String)
    notes = Column(Text)
    location = Column(String)
    is_remote = Column(Boolean, default=False)
    tags = Column(JSONColumn, default=list)
    status = Column(String, nullable=False, default=JobStatus.SAVED.value, index=True)
    # Legacy free-text salary; salary_min/salary_max are integer cents
    salary = Column(String)
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_currency = Column(String, default="USD")
    salary_type = Column(String)
    last_activity_at = Column(DateTime(timezone=True), default=_utcnow)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    interviews = relationship(
        "Interview",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    offers = relationship(
        "SalaryOffer",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    salary_history = relationship(
        "SalaryHistory",
        back_populates="job",
        cascade="all, delete-orphan",
    )
