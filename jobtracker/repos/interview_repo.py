from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session, joinedload

from jobtracker.core.ids import generate_id
from jobtracker.models.enums import InterviewStatus
from jobtracker.models.interview import Interview
from jobtracker.repos.base import apply_patch, plain_values

ACTIVE_STATUSES = (InterviewStatus.SCHEDULED.value, InterviewStatus.CONFIRMED.value)


def _base_query(db: Session, user_id: str):
    return (
        db.query(Interview)
        .options(joinedload(Interview.job), joinedload(Interview.application))
        .filter(Interview.user_id == user_id)
    )


def list_for_user(db: Session, user_id: str, job_id: str | None = None) -> list[Interview]:
    q = _base_query(db, user_id)
    if job_id:
        q = q.filter(Interview.job_id == job_id)
    return q.order_by(Interview.scheduled_at.asc()).all()


def list_upcoming(db: Session, user_id: str, start: datetime, end: datetime) -> list[Interview]:
    """Scheduled or confirmed interviews in [start, end]."""
    return (
        _base_query(db, user_id)
        .filter(
            Interview.status.in_(ACTIVE_STATUSES),
            Interview.scheduled_at >= start,
            Interview.scheduled_at <= end,
        )
        .order_by(Interview.scheduled_at.asc())
        .all()
    )


def get_by_id(db: Session, interview_id: str, user_id: str) -> Interview | None:
    return _base_query(db, user_id).filter(Interview.id == interview_id).first()


def create(db: Session, user_id: str, data: dict[str, Any]) -> Interview:
    interview = Interview(id=generate_id(), user_id=user_id, **plain_values(data))
    db.add(interview)
    db.commit()
    db.refresh(interview)
    return interview


def update(db: Session, interview_id: str, user_id: str, patch: dict[str, Any]) -> Interview | None:
    interview = get_by_id(db, interview_id, user_id)
    if not interview:
        return None
    apply_patch(interview, patch)
    db.commit()
    db.refresh(interview)
    return interview


def delete(db: Session, interview_id: str, user_id: str) -> bool:
    interview = get_by_id(db, interview_id, user_id)
    if not interview:
        return False
    db.delete(interview)
    db.commit()
    return True
