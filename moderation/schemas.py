# src/moderation/schemas.py
from datetime import datetime
from typing import Optional
from auth.schemas import CamelModel
from community.schemas import ContentPreview


class ReportResponse(CamelModel):
    """Schema for a report enriched with reporter name and content preview."""
    id: str
    content_type: str
    content_id: str
    reported_by: str
    reason: Optional[str] = None
    status: str
    reported_at: datetime
    resolved_by: Optional[str] = None
    resolved_at: Optional[datetime] = None
    resolution: Optional[str] = None
    reporter_name: str
    content_data: Optional[ContentPreview] = None


class ReportResolution(CamelModel):
    """Schema for resolving a report."""
    action: Optional[str] = None  # approve, reject, dismiss
    reason: Optional[str] = None
