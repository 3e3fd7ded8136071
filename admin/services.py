# src/admin/services.py
import logging
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from auth.models import User, AdminAction
from auth.schemas import UserResponse
from admin.schemas import AdminActionResponse, Pagination, UserListResponse, UserUpdate
from config import settings
from errors import InvalidInput, NotFound

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"(.{2}).*(@.*)")


def redact_email(email: Optional[str]) -> Optional[str]:
    """Keep the first two characters and the domain of an email address.

    Local parts of two characters or fewer are masked entirely.
    """
    if not email:
        return None
    local, at, domain = email.partition("@")
    if len(local) < 3:
        return f"***{at}{domain}"
    return EMAIL_PATTERN.sub(r"\1***\2", email)


class AuditLogger:
    @staticmethod
    def record(admin_id: str, action: str, db: Session, reason: Optional[str] = None, **details: Any) -> AdminAction:
        """Append an admin action to the audit trail.

        The record joins the caller's transaction and is committed with the
        mutation it describes. Existing records are never touched.
        """
        entry = AdminAction(
            admin_id=admin_id,
            action=action,
            reason=reason or settings.DEFAULT_REASON,
            timestamp=datetime.utcnow(),
            **details,
        )
        db.add(entry)
        return entry

    @staticmethod
    def list_logs(limit: int, db: Session) -> List[AdminActionResponse]:
        """Return the newest audit entries with the acting admin's display name."""
        entries = db.query(AdminAction).order_by(AdminAction.timestamp.desc()).limit(limit).all()
        names: Dict[str, str] = {}
        logs = []
        for entry in entries:
            if entry.admin_id not in names:
                admin = db.get(User, entry.admin_id)
                names[entry.admin_id] = (admin.display_name or "Unknown Admin") if admin else "Unknown"
            logs.append(AdminActionResponse(
                id=entry.id,
                admin_id=entry.admin_id,
                admin_name=names[entry.admin_id],
                action=entry.action,
                target_user_id=entry.target_user_id,
                report_id=entry.report_id,
                changes=entry.changes,
                resolution=entry.resolution,
                reason=entry.reason,
                timestamp=entry.timestamp,
            ))
        return logs


class UserAdminService:
    @staticmethod
    def list_users(
            page: int,
            limit: int,
            role: Optional[str],
            status: Optional[str],
            db: Session
    ) -> UserListResponse:
        """Retrieve a page of users, newest first, with optional filters."""
        query = db.query(User)
        if role:
            query = query.filter(User.role == role)
        if status:
            query = query.filter(User.status == status)

        total = query.count()
        users = query.order_by(User.joined_date.desc()).offset((page - 1) * limit).limit(limit).all()

        items = []
        for user in users:
            item = UserResponse.model_validate(user)
            item.email = redact_email(user.email)
            items.append(item)

        return UserListResponse(
            users=items,
            pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
        )

    @staticmethod
    def update_user(user_id: str, update: UserUpdate, admin_id: str, db: Session) -> None:
        """Change a user's role and/or status and record the change in the audit trail."""
        changes: Dict[str, str] = {}
        if update.role:
            changes["role"] = update.role
        if update.status:
            changes["status"] = update.status
        if not changes:
            raise InvalidInput("No valid updates provided")
        if "role" in changes and changes["role"] not in settings.USER_ROLES:
            raise InvalidInput("Invalid role")

        user = db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")

        AuditLogger.record(
            admin_id,
            "user_update",
            db,
            reason=update.reason,
            target_user_id=user_id,
            changes=changes,
        )
        for field, value in changes.items():
            setattr(user, field, value)
        user.last_modified = datetime.utcnow()
        user.modified_by = admin_id
        db.commit()
        logger.info(f"Admin {admin_id} updated user {user_id}: {changes}")
