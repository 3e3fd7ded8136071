# src/admin/schemas.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from auth.schemas import CamelModel, UserResponse


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class UserListResponse(CamelModel):
    """Schema for a page of user profiles."""
    users: List[UserResponse]
    pagination: Pagination


class UserUpdate(CamelModel):
    """Schema for an admin change to a user's role or status."""
    role: Optional[str] = None
    status: Optional[str] = None
    reason: Optional[str] = None


class ActionResult(CamelModel):
    success: bool
    message: str


class AdminActionResponse(CamelModel):
    """Schema for an audit log entry with the acting admin's name."""
    id: str
    admin_id: str
    admin_name: str
    action: str
    target_user_id: Optional[str] = None
    report_id: Optional[str] = None
    changes: Optional[Dict[str, Any]] = None
    resolution: Optional[str] = None
    reason: str
    timestamp: Optional[datetime] = None
