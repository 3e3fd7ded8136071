# src/moderation/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from moderation.services import ModerationService
from moderation.schemas import ReportResponse, ReportResolution
from admin.schemas import ActionResult
from auth.routes import check_admin_role
from auth.models import User
from config import settings
from database import get_db

router = APIRouter(prefix="/admin/reports", tags=["moderation"])


@router.get("", response_model=List[ReportResponse])
def get_reports(
    status: str = "pending",
    limit: int = Query(20, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Retrieve reported content awaiting review."""
    return ModerationService.list_reports(status, limit, db)


@router.patch("/{report_id}", response_model=ActionResult)
def resolve_report(
    report_id: str,
    resolution: ReportResolution,
    db: Session = Depends(get_db),
    current_user: User = Depends(check_admin_role)
):
    """Approve, reject or dismiss a report."""
    new_status = ModerationService.resolve_report(report_id, resolution.action, resolution.reason, current_user.id, db)
    return ActionResult(success=True, message=f"Report {new_status} successfully")
