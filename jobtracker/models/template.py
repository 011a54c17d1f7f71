from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from jobtracker.database import Base


class Template(Base):
    """Reusable cover-note / message text with {placeholders}."""

    __tablename__ = "templates"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
