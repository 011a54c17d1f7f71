import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session

from jobtracker.core.ids import generate_id
from jobtracker.models.job import Job
from jobtracker.repos.base import apply_patch, plain_values

logger = logging.getLogger(__name__)


def list_for_user(db: Session, user_id: str, status: str | None = None) -> list[Job]:
    q = db.query(Job).filter(Job.user_id == user_id)
    if status:
        q = q.filter(Job.status == status)
    return q.order_by(Job.last_activity_at.desc(), Job.created_at.desc()).all()


def get_by_id(db: Session, job_id: str, user_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id, Job.user_id == user_id).first()


def create(db: Session, user_id: str, data: dict[str, Any]) -> Job:
    job = Job(
        id=generate_id(),
        user_id=user_id,
        last_activity_at=datetime.now(timezone.utc),
        **plain_values(data),
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def touch(job: Job) -> None:
    """Bump last_activity_at; caller commits."""
    job.last_activity_at = datetime.now(timezone.utc)


def update(db: Session, job_id: str, user_id: str, patch: dict[str, Any]) -> Job | None:
    job = get_by_id(db, job_id, user_id)
    if not job:
        return None
    apply_patch(job, patch)
    touch(job)
    db.commit()
    db.refresh(job)
    return job


def delete(db: Session, job_id: str, user_id: str) -> bool:
    """Delete a job and everything hanging off it. Returns True if deleted."""
    job = get_by_id(db, job_id, user_id)
    if not job:
        return False
    db.delete(job)
    db.commit()
    return True


def list_with_salary(db: Session, user_id: str) -> list[Job]:
    return (
        db.query(Job)
        .filter(
            Job.user_id == user_id,
            or_(Job.salary_min.isnot(None), Job.salary_max.isnot(None), Job.salary.isnot(None)),
        )
        .order_by(Job.created_at.desc())
        .all()
    )


def list_unmigrated_salaries(db: Session) -> list[Job]:
    """Jobs (any user) with a legacy free-text salary and no salary_min yet."""
    return (
        db.query(Job)
        .filter(Job.salary.isnot(None), Job.salary_min.is_(None))
        .all()
    )
