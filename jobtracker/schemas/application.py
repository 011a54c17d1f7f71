from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.models.enums import ApplicationStatus
from jobtracker.schemas.job import JobResponse
from jobtracker.schemas.patch import PatchModel


class ApplicationCreate(BaseModel):
    job_id: str = Field(min_length=1)
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_at: datetime | None = None
    resume_id: str | None = None
    cover_note: str | None = None
    next_action: datetime | None = None
    notes: str | None = None


class ApplicationUpdate(PatchModel):
    not_null = ("status",)

    status: ApplicationStatus | None = None
    applied_at: datetime | None = None
    resume_id: str | None = None
    cover_note: str | None = None
    next_action: datetime | None = None
    notes: str | None = None


class ApplicationResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    resume_id: str | None = None
    status: str
    applied_at: datetime | None = None
    next_action: datetime | None = None
    cover_note: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ApplicationWithJob(ApplicationResponse):
    job: JobResponse | None = None
