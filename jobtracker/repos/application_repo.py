import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.orm import Session, joinedload

from jobtracker.config import settings
from jobtracker.core.ids import generate_id
from jobtracker.models.application import Application
from jobtracker.models.enums import ApplicationStatus, JobStatus
from jobtracker.models.job import Job
from jobtracker.repos.base import apply_patch, plain_values
from jobtracker.repos.job_repo import touch

logger = logging.getLogger(__name__)


def default_next_action(applied_at: datetime) -> datetime:
    return applied_at + timedelta(days=settings.follow_up_days)


def create(db: Session, user_id: str, job: Job, data: dict[str, Any]) -> Application:
    """
    Record an application against job. applied_at defaults to now and
    next_action to applied_at + follow_up_days. Moves the job to APPLIED.
    """
    data = plain_values(data)
    applied_at = data.pop("applied_at", None) or datetime.now(timezone.utc)
    next_action = data.pop("next_action", None) or default_next_action(applied_at)
    application = Application(
        id=generate_id(),
        user_id=user_id,
        job_id=job.id,
        status=data.pop("status", None) or ApplicationStatus.APPLIED.value,
        applied_at=applied_at,
        next_action=next_action,
        resume_id=data.pop("resume_id", None) or None,
        cover_note=data.pop("cover_note", None) or None,
        notes=data.pop("notes", None) or None,
    )
    db.add(application)
    job.status = JobStatus.APPLIED.value
    touch(job)
    db.commit()
    db.refresh(application)
    return application


def list_for_user(db: Session, user_id: str) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.user_id == user_id)
        .order_by(Application.applied_at.desc(), Application.created_at.desc())
        .all()
    )


def list_due_between(db: Session, user_id: str, start: datetime, end: datetime) -> list[Application]:
    """Applications whose next_action falls in [start, end)."""
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(
            Application.user_id == user_id,
            Application.next_action >= start,
            Application.next_action < end,
        )
        .order_by(Application.next_action.asc())
        .all()
    )


def list_overdue(db: Session, user_id: str, before: datetime) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.user_id == user_id, Application.next_action < before)
        .order_by(Application.next_action.asc())
        .all()
    )


def get_by_id(db: Session, application_id: str, user_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id, Application.user_id == user_id)
        .first()
    )


def update(db: Session, application_id: str, user_id: str, patch: dict[str, Any]) -> Application | None:
    application = get_by_id(db, application_id, user_id)
    if not application:
        return None
    apply_patch(application, patch)
    if application.job is not None:
        touch(application.job)
    db.commit()
    db.refresh(application)
    return application


def delete(db: Session, application_id: str, user_id: str) -> bool:
    application = get_by_id(db, application_id, user_id)
    if not application:
        return False
    db.delete(application)
    db.commit()
    return True
