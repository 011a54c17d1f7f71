import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobtracker.config import settings
from jobtracker.core.rate_limiter import rate_limiter
from jobtracker.database import init_db, engine
from jobtracker.logging_config import setup_logging
from jobtracker.routers import (
    applications,
    company_research,
    interviews,
    jobs,
    parse,
    resumes,
    salary,
    templates,
)

setup_logging()
logger = logging.getLogger(__name__)

RATE_LIMIT_WINDOW_SECONDS = 60

app = FastAPI(
    title="Job Tracker API",
    description="Track job postings, applications, interviews, resumes, templates and salary data.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# /jobs/parse-url is registered ahead of the /jobs/{job_id} routes
app.include_router(parse.router)
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(interviews.router)
app.include_router(resumes.router)
app.include_router(templates.router)
app.include_router(company_research.router)
app.include_router(salary.router)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    detail = _describe_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def apply_rate_limits(request, call_next):
    path = request.url.path
    if request.method == "OPTIONS":
        return await call_next(request)

    limit = None
    if request.method == "POST" and path == "/jobs/parse-url":
        limit = settings.rate_limit_parse_url_per_min

    if limit is not None and limit > 0:
        client_ip = request.client.host if request.client else "unknown"
        key = f"{client_ip}:{path}"
        allowed, retry_after = rate_limiter.allow(key, limit=limit, window_seconds=RATE_LIMIT_WINDOW_SECONDS)
        if not allowed:
            logger.info("Rate limit hit: key=%s retry_after=%ds", key, retry_after)
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests. Please retry shortly."},
                headers={"Retry-After": str(retry_after)},
            )

    return await call_next(request)


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting Job Tracker API")
    env = (settings.app_env or "development").lower()
    if "username:password@" in settings.database_url:
        if env in {"production", "prod"}:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
        logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")
    init_db()
