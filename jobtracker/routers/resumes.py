import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import resume_repo
from jobtracker.schemas.resume import ResumeCreate, ResumeResponse, ResumeUpdate, ResumeWithUsage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get("", response_model=list[ResumeWithUsage])
def list_resumes(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Resumes newest first, each with the applications that used it."""
    return resume_repo.list_for_user(db, user_id)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume(
    body: ResumeCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        resume = resume_repo.create(db, user_id, body.name, body.file_url)
    except Exception as e:
        logger.exception("Failed saving resume for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create resume") from e
    logger.info("Resume saved for user %s", user_id)
    return resume


@router.patch("/{resume_id}", response_model=ResumeResponse)
def update_resume(
    resume_id: str,
    body: ResumeUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    resume = resume_repo.update(db, resume_id, user_id, body.model_dump(exclude_unset=True))
    if not resume:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return resume


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume(
    resume_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not resume_repo.delete(db, resume_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resume not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
