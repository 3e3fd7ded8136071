# src/auth/models.py
from sqlalchemy import Column, String, DateTime, Text, JSON
from database import Base
from datetime import datetime
from typing import Optional
from uuid import uuid4


def new_id() -> str:
    return uuid4().hex


class User(Base):
    """Profile of a user signed up through the identity provider."""
    __tablename__ = "users"

    id: str = Column(String, primary_key=True, index=True)  # identity provider uid
    display_name: Optional[str] = Column(String, nullable=True)
    email: Optional[str] = Column(String, nullable=True)
    role: Optional[str] = Column(String, nullable=True, index=True)  # student, moderator, admin
    status: str = Column(String, nullable=False, default="active", index=True)
    joined_date: datetime = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    last_modified: Optional[datetime] = Column(DateTime, nullable=True)
    modified_by: Optional[str] = Column(String, nullable=True)


class AdminAction(Base):
    """Append-only audit record of an administrative mutation."""
    __tablename__ = "admin_actions"

    id: str = Column(String, primary_key=True, default=new_id)
    admin_id: str = Column(String, nullable=False, index=True)
    action: str = Column(String, nullable=False)  # user_update, report_resolved
    target_user_id: Optional[str] = Column(String, nullable=True)
    report_id: Optional[str] = Column(String, nullable=True)
    changes: Optional[dict] = Column(JSON, nullable=True)
    resolution: Optional[str] = Column(String, nullable=True)
    reason: str = Column(Text, nullable=False)
    timestamp: datetime = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
