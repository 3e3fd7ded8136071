# src/progress/routes.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from progress.services import ProgressService
from progress.schemas import ProgressUpdate, ProgressResponse
from auth.routes import get_principal
from auth.schemas import Principal
from database import get_db

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressResponse)
def get_progress(principal: Principal = Depends(get_principal), db: Session = Depends(get_db)):
    """Retrieve the caller's progress."""
    return ProgressService.get_progress(principal.id, db)


@router.post("", response_class=PlainTextResponse)
def update_progress(
    update: ProgressUpdate,
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    """Merge progress fields for the caller."""
    ProgressService.set_progress(principal.id, update, db)
    return "Progress updated!"
