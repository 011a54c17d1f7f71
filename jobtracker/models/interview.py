from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobtracker.database import Base
from jobtracker.models.enums import InterviewStatus


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    application_id = Column(String, ForeignKey("applications.id", ondelete="SET NULL"), nullable=True)
    title = Column(String, nullable=False)
    type = Column(String, nullable=False)
    scheduled_at = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutes
    location = Column(String)
    participants = Column(Text)
    notes = Column(Text)
    reminder_at = Column(DateTime(timezone=True))
    status = Column(String, nullable=False, default=InterviewStatus.SCHEDULED.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    job = relationship("Job", back_populates="interviews")
    application = relationship("Application", back_populates="interviews")
