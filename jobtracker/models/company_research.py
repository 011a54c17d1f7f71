from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from jobtracker.database import Base, JSONColumn


class CompanyResearch(Base):
    __tablename__ = "company_research"
    __table_args__ = (UniqueConstraint("user_id", "company_name", name="uq_company_research_user_company"),)

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    company_name = Column(String, nullable=False)
    insights = Column(Text, default="")
    rating = Column(Integer)  # 1..5
    pros = Column(JSONColumn, default=list)
    cons = Column(JSONColumn, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=func.now(),
    )
