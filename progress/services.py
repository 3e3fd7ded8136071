# src/progress/services.py
import logging
from sqlalchemy.orm import Session
from progress.models import UserProgress
from progress.schemas import ProgressUpdate, ProgressResponse

logger = logging.getLogger(__name__)


class ProgressService:
    @staticmethod
    def get_progress(user_id: str, db: Session) -> ProgressResponse:
        """Return the stored progress, or zero values when nothing was saved yet."""
        record = db.get(UserProgress, user_id)
        if record is None:
            return ProgressResponse()
        return ProgressResponse.model_validate(record)

    @staticmethod
    def set_progress(user_id: str, update: ProgressUpdate, db: Session) -> ProgressResponse:
        """Merge the supplied fields into the user's progress."""
        changes = update.model_dump(exclude_unset=True)
        record = db.get(UserProgress, user_id)
        if record is None:
            record = UserProgress(user_id=user_id, progress=0, badges=[], recent_activity=[])
            db.add(record)
        for field, value in changes.items():
            if value is not None:
                setattr(record, field, list(value) if isinstance(value, list) else value)
        db.commit()
        db.refresh(record)
        logger.info(f"Progress for {user_id} updated: {sorted(changes)}")
        return ProgressResponse.model_validate(record)
