from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.schemas.patch import PatchModel


class ResumeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=500)
    file_url: str = Field(min_length=1, max_length=2000)


class ResumeUpdate(PatchModel):
    not_null = ("name", "file_url")

    name: str | None = Field(default=None, min_length=1, max_length=500)
    file_url: str | None = Field(default=None, min_length=1, max_length=2000)


class ResumeJobRef(BaseModel):
    title: str
    company: str
    status: str

    class Config:
        from_attributes = True


class ResumeApplicationRef(BaseModel):
    id: str
    job: ResumeJobRef | None = None

    class Config:
        from_attributes = True


class ResumeResponse(BaseModel):
    id: str
    user_id: str
    name: str
    file_url: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ResumeWithUsage(ResumeResponse):
    applications: list[ResumeApplicationRef] = []
