import logging
from datetime import datetime, timedelta, timezone
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import application_repo, job_repo, resume_repo
from jobtracker.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    ApplicationWithJob,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


def _utc_day_bounds(now: datetime) -> tuple[datetime, datetime]:
    start = now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def _require_owned_resume(db: Session, resume_id: str | None, user_id: str) -> None:
    if resume_id and not resume_repo.get_by_id(db, resume_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def create_application(
    body: ApplicationCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Record an application. Defaults: status APPLIED, applied_at now,
    next_action applied_at + 5 days. Marks the job APPLIED.
    """
    job = job_repo.get_by_id(db, body.job_id, user_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    _require_owned_resume(db, body.resume_id, user_id)
    try:
        application = application_repo.create(db, user_id, job, body.model_dump(exclude={"job_id"}))
    except Exception as e:
        logger.exception("Failed creating application for user=%s job=%s: %s", user_id, body.job_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create application") from e
    logger.info("Application created: user=%s job=%s application=%s", user_id, job.id, application.id)
    return application


@router.get("", response_model=list[ApplicationWithJob])
def list_applications(
    due: Literal["today", "overdue"] | None = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    All applications (newest first), or follow-ups: due=today returns those
    whose next_action falls in the current UTC day, due=overdue those before it.
    """
    if due is None:
        return application_repo.list_for_user(db, user_id)
    start, end = _utc_day_bounds(datetime.now(timezone.utc))
    if due == "today":
        return application_repo.list_due_between(db, user_id, start, end)
    return application_repo.list_overdue(db, user_id, start)


@router.patch("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: str,
    body: ApplicationUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    _require_owned_resume(db, body.resume_id, user_id)
    application = application_repo.update(db, application_id, user_id, body.model_dump(exclude_unset=True))
    if not application:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    logger.info("Application updated: user=%s application=%s", user_id, application_id)
    return application


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not application_repo.delete(db, application_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
