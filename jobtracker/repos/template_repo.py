from typing import Any

from sqlalchemy.orm import Session

from jobtracker.core.ids import generate_id
from jobtracker.models.template import Template
from jobtracker.repos.base import apply_patch


def create(db: Session, user_id: str, name: str, body: str) -> Template:
    template = Template(id=generate_id(), user_id=user_id, name=name, body=body)
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


def list_for_user(db: Session, user_id: str) -> list[Template]:
    return (
        db.query(Template)
        .filter(Template.user_id == user_id)
        .order_by(Template.created_at.desc())
        .all()
    )


def get_by_id(db: Session, template_id: str, user_id: str) -> Template | None:
    return (
        db.query(Template)
        .filter(Template.id == template_id, Template.user_id == user_id)
        .first()
    )


def update(db: Session, template_id: str, user_id: str, patch: dict[str, Any]) -> Template | None:
    template = get_by_id(db, template_id, user_id)
    if not template:
        return None
    apply_patch(template, patch)
    db.commit()
    db.refresh(template)
    return template


def delete(db: Session, template_id: str, user_id: str) -> bool:
    template = get_by_id(db, template_id, user_id)
    if not template:
        return False
    db.delete(template)
    db.commit()
    return True
