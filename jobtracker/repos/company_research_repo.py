from datetime import datetime, timezone

from sqlalchemy.orm import Session

from jobtracker.core.ids import generate_id
from jobtracker.models.company_research import CompanyResearch


def list_for_user(db: Session, user_id: str) -> list[CompanyResearch]:
    return (
        db.query(CompanyResearch)
        .filter(CompanyResearch.user_id == user_id)
        .order_by(CompanyResearch.updated_at.desc())
        .all()
    )


def get_by_company(db: Session, user_id: str, company_name: str) -> CompanyResearch | None:
    return (
        db.query(CompanyResearch)
        .filter(CompanyResearch.user_id == user_id, CompanyResearch.company_name == company_name)
        .first()
    )


def upsert(
    db: Session,
    user_id: str,
    company_name: str,
    insights: str | None = None,
    rating: int | None = None,
    pros: list[str] | None = None,
    cons: list[str] | None = None,
) -> CompanyResearch:
    """Create or overwrite the research note for (user, company_name)."""
    company_name = company_name.strip()
    research = get_by_company(db, user_id, company_name)
    if research is None:
        research = CompanyResearch(id=generate_id(), user_id=user_id, company_name=company_name)
        db.add(research)
    research.insights = insights or ""
    research.rating = rating or None
    research.pros = pros or []
    research.cons = cons or []
    research.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(research)
    return research


def delete_by_company(db: Session, user_id: str, company_name: str) -> bool:
    research = get_by_company(db, user_id, company_name)
    if not research:
        return False
    db.delete(research)
    db.commit()
    return True
