import logging

from fastapi import HTTPException, Request, status

from jobtracker.config import settings

logger = logging.getLogger(__name__)


def get_current_user_id(request: Request) -> str:
    """
    Dev auth: trust the user id the client sends in the x-user-id header.
    Every repository call is scoped by the returned id.
    """
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        logger.info("Auth failed: missing %s header on %s %s", settings.user_id_header, request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Unauthenticated: set {settings.user_id_header}",
        )
    return user_id
