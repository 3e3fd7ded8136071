# src/community/models.py
from sqlalchemy import Column, String, ForeignKey, Text, Boolean, DateTime
from database import Base
from datetime import datetime
from typing import Optional
from auth.models import new_id


class Post(Base):
    """Represents a community post written by a user."""
    __tablename__ = "community_posts"

    id: str = Column(String, primary_key=True, default=new_id)
    author_id: str = Column(String, nullable=False, index=True)
    content: str = Column(Text, nullable=False)
    created_at: datetime = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    is_reported: bool = Column(Boolean, nullable=False, default=False)
    moderated_by: Optional[str] = Column(String, nullable=True)
    moderated_at: Optional[datetime] = Column(DateTime, nullable=True)


class Comment(Base):
    """Represents a comment on a post.

    Comments live in one table keyed by their own id, so a comment can be found
    without knowing its parent post.
    """
    __tablename__ = "comments"

    id: str = Column(String, primary_key=True, default=new_id)
    post_id: str = Column(String, ForeignKey("community_posts.id"), nullable=False, index=True)
    author_id: str = Column(String, nullable=False, index=True)
    content: str = Column(Text, nullable=False)
    created_at: datetime = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    is_reported: bool = Column(Boolean, nullable=False, default=False)
    moderated_by: Optional[str] = Column(String, nullable=True)
    moderated_at: Optional[datetime] = Column(DateTime, nullable=True)
