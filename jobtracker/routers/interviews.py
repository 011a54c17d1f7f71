import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import application_repo, interview_repo, job_repo
from jobtracker.schemas.interview import InterviewCreate, InterviewResponse, InterviewUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/interviews", tags=["interviews"])


def _require_owned_application(db: Session, application_id: str | None, user_id: str) -> None:
    if application_id and not application_repo.get_by_id(db, application_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")


@router.get("", response_model=list[InterviewResponse])
def list_interviews(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return interview_repo.list_for_user(db, user_id)


@router.get("/upcoming", response_model=list[InterviewResponse])
def list_upcoming_interviews(
    days: int = Query(default=7, ge=1, le=365),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Scheduled or confirmed interviews between now and now + days."""
    now = datetime.now(timezone.utc)
    return interview_repo.list_upcoming(db, user_id, now, now + timedelta(days=days))


@router.get("/job/{job_id}", response_model=list[InterviewResponse])
def list_job_interviews(
    job_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return interview_repo.list_for_user(db, user_id, job_id=job_id)


@router.post("", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
def create_interview(
    body: InterviewCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not job_repo.get_by_id(db, body.job_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    _require_owned_application(db, body.application_id, user_id)
    try:
        interview = interview_repo.create(db, user_id, body.model_dump())
    except Exception as e:
        logger.exception("Failed creating interview for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create interview") from e
    logger.info("Interview created: user=%s job=%s interview=%s", user_id, body.job_id, interview.id)
    return interview


@router.patch("/{interview_id}", response_model=InterviewResponse)
def update_interview(
    interview_id: str,
    body: InterviewUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    _require_owned_application(db, body.application_id, user_id)
    interview = interview_repo.update(db, interview_id, user_id, body.model_dump(exclude_unset=True))
    if not interview:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    logger.info("Interview updated: user=%s interview=%s", user_id, interview_id)
    return interview


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview(
    interview_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not interview_repo.delete(db, interview_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
