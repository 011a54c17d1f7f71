import logging

from sqlalchemy import JSON, create_engine, inspect
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import sessionmaker, declarative_base

from jobtracker.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests).
JSONColumn = JSON().with_variant(JSONB(), "postgresql")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _import_models():
    from jobtracker.models import (  # noqa: F401
        Job,
        Application,
        Interview,
        Resume,
        Template,
        CompanyResearch,
        SalaryOffer,
        SalaryHistory,
    )


def init_db():
    _import_models()

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized")
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise


def ensure_tables_exist():
    """Create any missing tables without touching existing data."""
    _import_models()

    try:
        inspector = inspect(engine)
        existing_tables = set(inspector.get_table_names())

        # create_all only creates missing tables, never drops existing ones.
        Base.metadata.create_all(bind=engine)
        target_tables = set(Base.metadata.tables.keys())
        created_tables = sorted(target_tables - existing_tables)

        if created_tables:
            logger.info("Created missing DB tables: %s", ", ".join(created_tables))
        else:
            logger.info("All DB tables already exist; no schema changes applied.")
        return created_tables
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
