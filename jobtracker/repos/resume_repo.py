from typing import Any

from sqlalchemy.orm import Session, selectinload

from jobtracker.core.ids import generate_id
from jobtracker.models.application import Application
from jobtracker.models.resume import Resume
from jobtracker.repos.base import apply_patch


def create(db: Session, user_id: str, name: str, file_url: str) -> Resume:
    resume = Resume(
        id=generate_id(),
        user_id=user_id,
        name=name,
        file_url=file_url,
    )
    db.add(resume)
    db.commit()
    db.refresh(resume)
    return resume


def list_for_user(db: Session, user_id: str) -> list[Resume]:
    """Newest first, with the applications (and their jobs) that used each resume."""
    return (
        db.query(Resume)
        .options(selectinload(Resume.applications).joinedload(Application.job))
        .filter(Resume.user_id == user_id)
        .order_by(Resume.created_at.desc())
        .all()
    )


def get_by_id(db: Session, resume_id: str, user_id: str) -> Resume | None:
    return (
        db.query(Resume)
        .filter(Resume.id == resume_id, Resume.user_id == user_id)
        .first()
    )


def update(db: Session, resume_id: str, user_id: str, patch: dict[str, Any]) -> Resume | None:
    resume = get_by_id(db, resume_id, user_id)
    if not resume:
        return None
    apply_patch(resume, patch)
    db.commit()
    db.refresh(resume)
    return resume


def delete(db: Session, resume_id: str, user_id: str) -> bool:
    resume = get_by_id(db, resume_id, user_id)
    if not resume:
        return False
    db.delete(resume)
    db.commit()
    return True
