import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import get_current_user_id
from jobtracker.repos import company_research_repo
from jobtracker.schemas.company_research import CompanyResearchResponse, CompanyResearchUpsert

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/company-research", tags=["company-research"])


@router.get("", response_model=list[CompanyResearchResponse])
def list_company_research(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return company_research_repo.list_for_user(db, user_id)


@router.get("/{company_name}", response_model=CompanyResearchResponse)
def get_company_research(
    company_name: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    research = company_research_repo.get_by_company(db, user_id, company_name.strip())
    if not research:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company research not found")
    return research


@router.post("", response_model=CompanyResearchResponse, status_code=status.HTTP_201_CREATED)
def upsert_company_research(
    body: CompanyResearchUpsert,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Create or replace the research note for a company."""
    try:
        research = company_research_repo.upsert(
            db,
            user_id,
            body.company_name,
            insights=body.insights,
            rating=body.rating,
            pros=body.pros,
            cons=body.cons,
        )
    except Exception as e:
        logger.exception("Failed saving company research for user=%s: %s", user_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create/update company research",
        ) from e
    logger.info("Company research saved: user=%s company=%s", user_id, research.company_name)
    return research


@router.delete("/{company_name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company_research(
    company_name: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not company_research_repo.delete_by_company(db, user_id, company_name.strip()):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company research not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
