# src/admin/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from auth.models import User
from auth.routes import check_admin_role
from admin.schemas import ActionResult, AdminActionResponse, UserListResponse, UserUpdate
from admin.services import AuditLogger, UserAdminService
from analytics.schemas import CommunityStats, SystemStats
from analytics.services import AnalyticsService
from config import settings
from database import get_db

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=SystemStats)
def get_system_stats(db: Session = Depends(get_db), current_user: User = Depends(check_admin_role)):
    """Retrieve system-wide statistics."""
    return AnalyticsService.system_stats(db)


@router.get("/users", response_model=UserListResponse)
def get_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=settings.MAX_PAGE_SIZE),
    role: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Retrieve users with pagination and optional role/status filters."""
    return UserAdminService.list_users(page, limit, role, status, db)


@router.patch("/users/{user_id}", response_model=ActionResult)
def update_user(
    user_id: str,
    update: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Update a user's role or status."""
    UserAdminService.update_user(user_id, update, current_user.id, db)
    return ActionResult(success=True, message="User updated successfully")


@router.get("/community-stats", response_model=CommunityStats)
def get_community_stats(
    period: str = "7d",
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Retrieve community engagement for the last 7, 30 or 90 days."""
    return AnalyticsService.community_stats(period, db)


@router.get("/logs", response_model=List[AdminActionResponse])
def get_admin_logs(
    limit: int = Query(50, ge=1, le=settings.MAX_LOG_LIMIT),
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Retrieve admin action logs, newest first."""
    return AuditLogger.list_logs(limit, db)
