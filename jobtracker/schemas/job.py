from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.models.enums import JobStatus, SalaryType
from jobtracker.schemas.patch import PatchModel


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    company: str = Field(min_length=1, max_length=500)
    url: str = Field(min_length=1, max_length=2000)
    source: str | None = None
    favicon_url: str | None = None
    notes: str | None = None
    location: str | None = None
    is_remote: bool = False
    tags: list[str] = Field(default_factory=list)
    status: JobStatus = JobStatus.SAVED
    salary: str | None = None
    salary_min: int | None = Field(default=None, ge=0)
    salary_max: int | None = Field(default=None, ge=0)
    salary_currency: str = "USD"
    salary_type: SalaryType | None = None


class JobUpdate(PatchModel):
    """Partial update; only fields present in the request body are written."""

    not_null = ("title", "company", "url", "status")

    title: str | None = Field(default=None, min_length=1, max_length=500)
    company: str | None = Field(default=None, min_length=1, max_length=500)
    url: str | None = Field(default=None, min_length=1, max_length=2000)
    source: str | None = None
    favicon_url: str | None = None
    notes: str | None = None
    location: str | None = None
    is_remote: bool | None = None
    tags: list[str] | None = None
    status: JobStatus | None = None
    salary: str | None = None
    salary_min: int | None = Field(default=None, ge=0)
    salary_max: int | None = Field(default=None, ge=0)
    salary_currency: str | None = None
    salary_type: SalaryType | None = None


class JobResponse(BaseModel):
    id: str
    user_id: str
    title: str
    company: str
    url: str
    source: str | None = None
    favicon_url: str | None = None
    notes: str | None = None
    location: str | None = None
    is_remote: bool | None = False
    tags: list[str] | None = None
    status: str
    salary: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    salary_currency: str | None = None
    salary_type: str | None = None
    last_activity_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class JobBrief(BaseModel):
    id: str
    title: str
    company: str
    status: str

    class Config:
        from_attributes = True


class ParseUrlRequest(BaseModel):
    url: str = Field(min_length=1, max_length=2000)


class ParseUrlResponse(BaseModel):
    title: str
    company: str
    source: str
    favicon_url: str | None = None
