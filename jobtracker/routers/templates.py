import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import job_repo, template_repo
from jobtracker.schemas.template import (
    TemplateCreate,
    TemplateRenderRequest,
    TemplateRenderResponse,
    TemplateResponse,
    TemplateUpdate,
)
from jobtracker.services.template_renderer import render_template

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
def list_templates(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return template_repo.list_for_user(db, user_id)


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
def create_template(
    body: TemplateCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        template = template_repo.create(db, user_id, body.name, body.body)
    except Exception as e:
        logger.exception("Failed creating template for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create template") from e
    logger.info("Template created: user=%s template=%s", user_id, template.id)
    return template


@router.patch("/{template_id}", response_model=TemplateResponse)
def update_template(
    template_id: str,
    body: TemplateUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    template = template_repo.update(db, template_id, user_id, body.model_dump(exclude_unset=True))
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return template


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not template_repo.delete(db, template_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{template_id}/render", response_model=TemplateRenderResponse)
def render_template_for_job(
    template_id: str,
    body: TemplateRenderRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Fill a template's {jobTitle}/{company}/{skills}/{location}/{source} from one job."""
    template = template_repo.get_by_id(db, template_id, user_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    job = job_repo.get_by_id(db, body.job_id, user_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return TemplateRenderResponse(
        template_id=template_id,
        job_id=job.id,
        text=render_template(template.body, job),
    )
