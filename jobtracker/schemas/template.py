from datetime import datetime

from pydantic import BaseModel, Field

from jobtracker.schemas.patch import PatchModel


class TemplateCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1, max_length=50000)


class TemplateUpdate(PatchModel):
    not_null = ("name", "body")

    name: str | None = Field(default=None, min_length=1, max_length=200)
    body: str | None = Field(default=None, min_length=1, max_length=50000)


class TemplateResponse(BaseModel):
    id: str
    user_id: str
    name: str
    body: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class TemplateRenderRequest(BaseModel):
    job_id: str = Field(min_length=1)


class TemplateRenderResponse(BaseModel):
    template_id: str
    job_id: str
    text: str
