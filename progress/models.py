# src/progress/models.py
from sqlalchemy import Column, String, Float, DateTime, JSON
from database import Base
from datetime import datetime


class UserProgress(Base):
    """Learning progress of a single user, one row per user."""
    __tablename__ = "user_progress"

    user_id: str = Column(String, primary_key=True)  # identity provider uid
    progress: float = Column(Float, nullable=False, default=0)
    badges: list = Column(JSON, nullable=False, default=list)
    recent_activity: list = Column(JSON, nullable=False, default=list)
    updated_at: datetime = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
