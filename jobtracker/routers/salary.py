import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import application_repo, job_repo, salary_repo
from jobtracker.schemas.job import JobResponse
from jobtracker.schemas.salary import (
    HistoryCreate,
    HistoryResponse,
    OfferCreate,
    OfferResponse,
    OfferUpdate,
    SalaryParseRequest,
    SalaryParseResponse,
)
from jobtracker.services.salary_analytics import build_salary_analytics
from jobtracker.services.salary_parser import parse_salary_string

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/salary", tags=["salary"])


def _require_owned_job(db: Session, job_id: str, user_id: str) -> None:
    if not job_repo.get_by_id(db, job_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")


@router.get("/analytics")
def salary_analytics(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Aggregates over jobs with salary data plus offers and history. Amounts in cents."""
    jobs = job_repo.list_with_salary(db, user_id)
    offers = salary_repo.list_offers(db, user_id)
    history = salary_repo.list_history(db, user_id)
    return {
        "analytics": build_salary_analytics(jobs, offers),
        "jobs": [JobResponse.model_validate(j).model_dump(mode="json") for j in jobs],
        "offers": [OfferResponse.model_validate(o).model_dump(mode="json") for o in offers],
        "salary_history": [HistoryResponse.model_validate(h).model_dump(mode="json") for h in history],
    }


@router.post("/parse", response_model=SalaryParseResponse)
def parse_salary(
    body: SalaryParseRequest,
    user_id: str = Depends(get_current_user_id),
):
    """Normalise a free-text salary to annual cents."""
    parsed = parse_salary_string(body.text)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not parse salary")
    return parsed.as_dict()


@router.get("/offers", response_model=list[OfferResponse])
def list_offers(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return salary_repo.list_offers(db, user_id)


@router.post("/offers", response_model=OfferResponse, status_code=status.HTTP_201_CREATED)
def create_offer(
    body: OfferCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    _require_owned_job(db, body.job_id, user_id)
    if body.application_id and not application_repo.get_by_id(db, body.application_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    try:
        offer = salary_repo.create_offer(db, user_id, body.model_dump())
    except Exception as e:
        logger.exception("Failed creating salary offer for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create salary offer") from e
    logger.info("Salary offer created: user=%s job=%s offer=%s", user_id, body.job_id, offer.id)
    return offer


@router.patch("/offers/{offer_id}", response_model=OfferResponse)
def update_offer(
    offer_id: str,
    body: OfferUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    offer = salary_repo.update_offer(db, offer_id, user_id, body.model_dump(exclude_unset=True))
    if not offer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Offer not found")
    logger.info("Salary offer updated: user=%s offer=%s", user_id, offer_id)
    return offer


@router.delete("/offers/{offer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_offer(
    offer_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not salary_repo.delete_offer(db, offer_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Offer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/history", response_model=list[HistoryResponse])
def list_history(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return salary_repo.list_history(db, user_id)


@router.post("/history", response_model=HistoryResponse, status_code=status.HTTP_201_CREATED)
def create_history(
    body: HistoryCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    _require_owned_job(db, body.job_id, user_id)
    try:
        entry = salary_repo.create_history(db, user_id, body.model_dump())
    except Exception as e:
        logger.exception("Failed creating salary history for user=%s: %s", user_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create salary history") from e
    return entry
