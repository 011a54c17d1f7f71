from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CompanyResearchUpsert(BaseModel):
    company_name: str = Field(min_length=1, max_length=500)
    insights: str | None = None
    rating: int | None = None
    pros: list[str] | None = None
    cons: list[str] | None = None

    @field_validator("company_name")
    @classmethod
    def company_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("company_name is required")
        return v.strip()

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v: int | None) -> int | None:
        if v is not None and not 1 <= v <= 5:
            raise ValueError("Rating must be between 1 and 5")
        return v


class CompanyResearchResponse(BaseModel):
    id: str
    user_id: str
    company_name: str
    insights: str | None = ""
    rating: int | None = None
    pros: list[str] | None = None
    cons: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
