import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.models.enums import JobStatus
from jobtracker.repos import job_repo
from jobtracker.schemas.job import JobCreate, JobResponse, JobUpdate
from jobtracker.services.csv_export import jobs_to_csv

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobResponse])
def list_jobs(
    status: JobStatus | None = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Jobs for this user, most recently active first. Optional status filter."""
    jobs = job_repo.list_for_user(db, user_id, status=status.value if status else None)
    logger.debug("GET /jobs user=%s status=%s count=%d", user_id, status, len(jobs))
    return jobs


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        job = job_repo.create(db, user_id, body.model_dump())
    except Exception as e:
        logger.exception("Failed creating job for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create job") from e
    logger.info("Job created: user=%s job=%s", user_id, job.id)
    return job


@router.get("/export.csv")
def export_jobs_csv(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Download all of this user's jobs as CSV."""
    jobs = job_repo.list_for_user(db, user_id)
    content = jobs_to_csv(jobs)
    logger.info("Jobs CSV export: user=%s rows=%d", user_id, len(jobs))
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="jobs-export.csv"'},
    )


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    job = job_repo.get_by_id(db, job_id, user_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    body: JobUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    job = job_repo.update(db, job_id, user_id, body.model_dump(exclude_unset=True))
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("Job updated: user=%s job=%s", user_id, job_id)
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a job along with its applications, interviews and salary records."""
    if not job_repo.delete(db, job_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    logger.info("Job deleted: user=%s job=%s", user_id, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
