# src/community/schemas.py
from datetime import datetime
from typing import Optional
from auth.schemas import CamelModel


class ContentPreview(CamelModel):
    """Truncated view of reported content shown to moderators."""
    content: str
    author_id: str
    created_at: Optional[datetime] = None
    post_id: Optional[str] = None  # set for comments only
