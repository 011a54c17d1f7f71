import logging

from fastapi import APIRouter, Depends, HTTPException, status

from jobtracker.dependencies import get_current_user_id
from jobtracker.schemas.job import ParseUrlRequest, ParseUrlResponse
from jobtracker.services.url_metadata import fetch_url_metadata, hostname_of

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/parse-url", response_model=ParseUrlResponse)
def parse_url(
    body: ParseUrlRequest,
    user_id: str = Depends(get_current_user_id),
):
    """
    Guess title/company for a job posting URL from the page's meta tags.
    Rate-limited per client in main.apply_rate_limits.
    """
    url = body.url.strip()
    if not hostname_of(url):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="url must be an absolute http(s) URL")
    logger.info("Parse URL requested: user=%s host=%s", user_id, hostname_of(url))
    return fetch_url_metadata(url)
