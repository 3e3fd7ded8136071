# src/analytics/services.py
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Dict, Set, Tuple
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from auth.models import User
from community.models import Post, Comment
from moderation.models import Report
from analytics.schemas import CommunityStats, RecentActivity, SystemHealth, SystemStats
from config import settings
from errors import UpstreamError

logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


def resolve_period(period: str) -> Tuple[str, int]:
    """Map a period label to its day count, falling back to the widest window."""
    if period in settings.COMMUNITY_PERIODS:
        return period, settings.COMMUNITY_PERIODS[period]
    fallback = settings.FALLBACK_COMMUNITY_PERIOD
    return fallback, settings.COMMUNITY_PERIODS[fallback]


def engagement_rate(active_users: int, total_users: int) -> float:
    if total_users == 0:
        return 0
    return round(active_users / total_users * 100, 2)


class AnalyticsService:
    @staticmethod
    def community_stats(period: str, db: Session) -> CommunityStats:
        """Count posts, comments and distinct active users over a trailing window."""
        period, days = resolve_period(period)
        start_date = datetime.utcnow() - timedelta(days=days)

        posts = db.query(Post.id, Post.author_id).filter(Post.created_at >= start_date).all()
        total_users = db.query(User).count()

        active_user_ids: Set[str] = {post.author_id for post in posts}

        # Comments are only counted on posts that fall inside the window.
        total_comments = 0
        post_ids = [post.id for post in posts]
        if post_ids:
            comments = (
                db.query(Comment.author_id)
                .filter(Comment.post_id.in_(post_ids), Comment.created_at >= start_date)
                .all()
            )
            total_comments = len(comments)
            active_user_ids.update(comment.author_id for comment in comments)

        return CommunityStats(
            period=period,
            total_users=total_users,
            active_users=len(active_user_ids),
            total_posts=len(posts),
            total_comments=total_comments,
            engagement_rate=engagement_rate(len(active_user_ids), total_users),
        )

    @staticmethod
    def system_stats(db: Session) -> SystemStats:
        """Aggregate the admin dashboard figures; any store failure fails the whole call."""
        try:
            total_users = db.query(User).count()
            total_posts = db.query(Post).count()
            pending_reports = db.query(Report).filter(Report.status == "pending").count()

            role_distribution: Dict[str, int] = {}
            for role, count in db.query(User.role, func.count(User.id)).group_by(User.role).all():
                role = role or settings.DEFAULT_ROLE
                role_distribution[role] = role_distribution.get(role, 0) + count

            week_ago = datetime.utcnow() - timedelta(days=settings.RECENT_ACTIVITY_DAYS)
            new_posts = db.query(Post).filter(Post.created_at >= week_ago).count()
            new_users = db.query(User).filter(User.joined_date >= week_ago).count()
        except SQLAlchemyError as e:
            logger.error(f"System stats aggregation failed: {str(e)}", exc_info=True)
            raise UpstreamError(f"Failed to get system stats: {e.__class__.__name__}")

        return SystemStats(
            total_users=total_users,
            total_posts=total_posts,
            pending_reports=pending_reports,
            role_distribution=role_distribution,
            recent_activity=RecentActivity(new_users=new_users, new_posts=new_posts),
            system_health=SystemHealth(
                status="healthy",
                uptime=round(time.monotonic() - STARTED_AT, 3),
                timestamp=datetime.now(timezone.utc),
            ),
        )
