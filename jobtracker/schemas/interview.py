from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.models.enums import InterviewStatus, InterviewType
from jobtracker.schemas.job import JobBrief
from jobtracker.schemas.patch import PatchModel


class InterviewCreate(BaseModel):
    job_id: str = Field(min_length=1)
    application_id: str | None = None
    title: str = Field(min_length=1, max_length=500)
    type: InterviewType
    scheduled_at: datetime
    duration: int = Field(gt=0, le=24 * 60)  # minutes
    location: str | None = None
    participants: str | None = None
    notes: str | None = None
    reminder_at: datetime | None = None
    status: InterviewStatus = InterviewStatus.SCHEDULED


class InterviewUpdate(PatchModel):
    not_null = ("title", "type", "scheduled_at", "duration", "status")

    application_id: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    type: InterviewType | None = None
    scheduled_at: datetime | None = None
    duration: int | None = Field(default=None, gt=0, le=24 * 60)
    location: str | None = None
    participants: str | None = None
    notes: str | None = None
    reminder_at: datetime | None = None
    status: InterviewStatus | None = None


class ApplicationBrief(BaseModel):
    id: str
    status: str

    class Config:
        from_attributes = True


class InterviewResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    application_id: str | None = None
    title: str
    type: str
    scheduled_at: datetime
    duration: int
    location: str | None = None
    participants: str | None = None
    notes: str | None = None
    reminder_at: datetime | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    job: JobBrief | None = None
    application: ApplicationBrief | None = None

    class Config:
        from_attributes = True
