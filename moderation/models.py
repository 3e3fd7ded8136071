# src/moderation/models.py
from sqlalchemy import Column, String, Text, DateTime, Index
from database import Base
from datetime import datetime
from typing import Optional
from auth.models import new_id


class Report(Base):
    """A user's report against a post or comment."""
    __tablename__ = "reports"

    id: str = Column(String, primary_key=True, default=new_id)
    content_type: str = Column(String, nullable=False)  # post, comment
    content_id: str = Column(String, nullable=False)
    reported_by: str = Column(String, nullable=False)
    reason: Optional[str] = Column(Text, nullable=True)
    status: str = Column(String, nullable=False, default="pending")  # pending, approved, rejected, dismissed
    reported_at: datetime = Column(DateTime, nullable=False, default=datetime.utcnow)
    resolved_by: Optional[str] = Column(String, nullable=True)
    resolved_at: Optional[datetime] = Column(DateTime, nullable=True)
    resolution: Optional[str] = Column(Text, nullable=True)

    __table_args__ = (Index("ix_reports_status_reported_at", "status", "reported_at"),)
