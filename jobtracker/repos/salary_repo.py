from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session, joinedload

from jobtracker.core.ids import generate_id
from jobtracker.models.salary import SalaryHistory, SalaryOffer
from jobtracker.repos.base import apply_patch, plain_values


def to_cents(amount: float) -> int:
    return int(round(amount * 100))


def list_offers(db: Session, user_id: str) -> list[SalaryOffer]:
    return (
        db.query(SalaryOffer)
        .options(joinedload(SalaryOffer.job))
        .filter(SalaryOffer.user_id == user_id)
        .order_by(SalaryOffer.offered_at.desc())
        .all()
    )


def get_offer(db: Session, offer_id: str, user_id: str) -> SalaryOffer | None:
    return (
        db.query(SalaryOffer)
        .options(joinedload(SalaryOffer.job))
        .filter(SalaryOffer.id == offer_id, SalaryOffer.user_id == user_id)
        .first()
    )


def create_offer(db: Session, user_id: str, data: dict[str, Any]) -> SalaryOffer:
    """data["amount"] is in currency units."""
    data = plain_values(data)
    data["amount"] = to_cents(data["amount"])
    if not data.get("offered_at"):
        data["offered_at"] = datetime.now(timezone.utc)
    offer = SalaryOffer(id=generate_id(), user_id=user_id, **data)
    db.add(offer)
    db.commit()
    db.refresh(offer)
    return offer


def update_offer(db: Session, offer_id: str, user_id: str, patch: dict[str, Any]) -> SalaryOffer | None:
    offer = get_offer(db, offer_id, user_id)
    if not offer:
        return None
    patch = dict(patch)
    if patch.get("amount") is not None:
        patch["amount"] = to_cents(patch["amount"])
    apply_patch(offer, patch)
    db.commit()
    db.refresh(offer)
    return offer


def delete_offer(db: Session, offer_id: str, user_id: str) -> bool:
    offer = get_offer(db, offer_id, user_id)
    if not offer:
        return False
    db.delete(offer)
    db.commit()
    return True


def list_history(db: Session, user_id: str) -> list[SalaryHistory]:
    return (
        db.query(SalaryHistory)
        .options(joinedload(SalaryHistory.job))
        .filter(SalaryHistory.user_id == user_id)
        .order_by(SalaryHistory.effective_date.desc())
        .all()
    )


def create_history(db: Session, user_id: str, data: dict[str, Any]) -> SalaryHistory:
    """data["amount"] is in currency units; effective_date defaults to now."""
    data = plain_values(data)
    data["amount"] = to_cents(data["amount"])
    data["effective_date"] = data.get("effective_date") or datetime.now(timezone.utc)
    entry = SalaryHistory(id=generate_id(), user_id=user_id, **data)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry
