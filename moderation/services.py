# src/moderation/services.py
import logging
from datetime import datetime
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from auth.models import User
from admin.services import AuditLogger
from community.services import CommunityService
from moderation.models import Report
from moderation.schemas import ReportResponse
from config import settings
from errors import Conflict, InvalidInput, NotFound

logger = logging.getLogger(__name__)

RESOLUTION_STATUS: Dict[str, str] = {
    "approve": "approved",
    "reject": "rejected",
    "dismiss": "dismissed",
}


class ModerationService:
    @staticmethod
    def reporter_name(user_id: str, db: Session) -> str:
        reporter = db.get(User, user_id)
        if reporter is None:
            return "Unknown"
        return reporter.display_name or "Anonymous"

    @staticmethod
    def list_reports(status: str, limit: int, db: Session) -> List[ReportResponse]:
        """Retrieve reports with the given status, newest first, for review."""
        reports = (
            db.query(Report)
            .filter(Report.status == status)
            .order_by(Report.reported_at.desc())
            .limit(limit)
            .all()
        )
        return [
            ReportResponse(
                id=report.id,
                content_type=report.content_type,
                content_id=report.content_id,
                reported_by=report.reported_by,
                reason=report.reason,
                status=report.status,
                reported_at=report.reported_at,
                resolved_by=report.resolved_by,
                resolved_at=report.resolved_at,
                resolution=report.resolution,
                reporter_name=ModerationService.reporter_name(report.reported_by, db),
                content_data=CommunityService.preview(report.content_type, report.content_id, db),
            )
            for report in reports
        ]

    @staticmethod
    def resolve_report(report_id: str, action: Optional[str], reason: Optional[str], moderator_id: str, db: Session) -> str:
        """Resolve a pending report and return its new status.

        The status change only applies while the report is still pending, so
        two moderators racing on the same report cannot both resolve it. The
        status change, any content removal and the audit record are committed
        together.
        """
        if action not in RESOLUTION_STATUS:
            raise InvalidInput("Invalid action")

        report = db.get(Report, report_id)
        if report is None:
            raise NotFound("Report not found")

        new_status = RESOLUTION_STATUS[action]
        updated = (
            db.query(Report)
            .filter(Report.id == report_id, Report.status == "pending")
            .update(
                {
                    Report.status: new_status,
                    Report.resolved_by: moderator_id,
                    Report.resolved_at: datetime.utcnow(),
                    Report.resolution: reason or settings.DEFAULT_REASON,
                },
                synchronize_session=False,
            )
        )
        if updated == 0:
            db.rollback()
            raise Conflict("Report already resolved")

        if action == "approve":
            CommunityService.flag_content(report.content_type, report.content_id, moderator_id, db)

        AuditLogger.record(
            moderator_id,
            "report_resolved",
            db,
            reason=reason,
            report_id=report_id,
            resolution=action,
        )
        db.commit()
        logger.info(f"Report {report_id} {new_status} by {moderator_id}")
        return new_status
