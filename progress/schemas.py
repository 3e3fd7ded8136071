# src/progress/schemas.py
from typing import Any, List, Optional
from auth.schemas import CamelModel


class ProgressUpdate(CamelModel):
    """Partial progress update; fields left out are not touched."""
    progress: Optional[float] = None
    badges: Optional[List[str]] = None
    recent_activity: Optional[List[Any]] = None


class ProgressResponse(CamelModel):
    progress: float = 0
    badges: List[str] = []
    recent_activity: List[Any] = []
