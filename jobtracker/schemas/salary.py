from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.models.enums import OfferStatus, SalaryChangeType, SalaryType
from jobtracker.schemas.patch import PatchModel


class JobRef(BaseModel):
    title: str
    company: str
    location: str | None = None

    class Config:
        from_attributes = True


class OfferCreate(BaseModel):
    """amount is in currency units; stored as cents."""

    job_id: str = Field(min_length=1)
    application_id: str | None = None
    amount: float = Field(gt=0)
    currency: str = "USD"
    type: SalaryType = SalaryType.ANNUAL
    status: OfferStatus = OfferStatus.PENDING
    offered_at: datetime | None = None
    expires_at: datetime | None = None
    notes: str | None = None
    benefits: list[str] = Field(default_factory=list)


class OfferUpdate(PatchModel):
    not_null = ("amount", "currency", "type", "status")

    amount: float | None = Field(default=None, gt=0)
    currency: str | None = None
    type: SalaryType | None = None
    status: OfferStatus | None = None
    expires_at: datetime | None = None
    notes: str | None = None
    benefits: list[str] | None = None


class OfferResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    application_id: str | None = None
    amount: int
    currency: str
    type: str
    status: str
    offered_at: datetime | None = None
    expires_at: datetime | None = None
    notes: str | None = None
    benefits: list[str] | None = None
    created_at: datetime | None = None
    job: JobRef | None = None

    class Config:
        from_attributes = True


class HistoryCreate(BaseModel):
    job_id: str = Field(min_length=1)
    amount: float = Field(gt=0)
    currency: str = "USD"
    type: SalaryType = SalaryType.ANNUAL
    effective_date: datetime | None = None
    change_type: SalaryChangeType = SalaryChangeType.INITIAL
    notes: str | None = None


class HistoryResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    amount: int
    currency: str
    type: str
    effective_date: datetime
    change_type: str
    notes: str | None = None
    created_at: datetime | None = None
    job: JobRef | None = None

    class Config:
        from_attributes = True


class SalaryParseRequest(BaseModel):
    text: str = Field(min_length=1, max_length=500)


class SalaryParseResponse(BaseModel):
    min: int
    max: int
    currency: str
    type: str
