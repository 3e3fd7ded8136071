# src/community/services.py
import logging
from datetime import datetime
from typing import Optional, Union
from sqlalchemy.orm import Session
from community.models import Post, Comment
from community.schemas import ContentPreview
from config import settings

logger = logging.getLogger(__name__)


def truncate(content: str) -> str:
    return (content or "")[:settings.PREVIEW_LENGTH] + "..."


class CommunityService:
    @staticmethod
    def get_post(post_id: str, db: Session) -> Optional[Post]:
        return db.get(Post, post_id)

    @staticmethod
    def find_comment(comment_id: str, db: Session) -> Optional[Comment]:
        """Look a comment up by its own id, whichever post it belongs to."""
        return db.get(Comment, comment_id)

    @staticmethod
    def get_content(content_type: str, content_id: str, db: Session) -> Optional[Union[Post, Comment]]:
        if content_type == "post":
            return CommunityService.get_post(content_id, db)
        if content_type == "comment":
            return CommunityService.find_comment(content_id, db)
        return None

    @staticmethod
    def preview(content_type: str, content_id: str, db: Session) -> Optional[ContentPreview]:
        """Build a moderator preview of a post or comment, or None if it is gone."""
        item = CommunityService.get_content(content_type, content_id, db)
        if item is None:
            return None
        return ContentPreview(
            content=truncate(item.content),
            author_id=item.author_id,
            created_at=item.created_at,
            post_id=item.post_id if isinstance(item, Comment) else None,
        )

    @staticmethod
    def flag_content(content_type: str, content_id: str, moderator_id: str, db: Session) -> bool:
        """Mark content as removed by a moderator. Comments also lose their text.

        Changes are left uncommitted for the caller's transaction. Returns False
        when the content no longer exists.
        """
        item = CommunityService.get_content(content_type, content_id, db)
        if item is None:
            logger.warning(f"Reported {content_type} {content_id} not found, nothing to moderate")
            return False
        item.is_reported = True
        item.moderated_by = moderator_id
        item.moderated_at = datetime.utcnow()
        if isinstance(item, Comment):
            item.content = settings.REDACTION_MARKER
        return True
