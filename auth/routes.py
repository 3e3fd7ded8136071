# src/auth/routes.py
from fastapi import APIRouter, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from auth.services import IdentityProvider, RoleService, get_identity_provider
from auth.schemas import MeResponse, Principal, UserResponse
from auth.models import User
from database import get_db
from errors import Unauthenticated

router = APIRouter(prefix="/auth", tags=["auth"])
bearer_scheme = HTTPBearer(auto_error=False)


def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Principal:
    """Resolve the bearer token into the calling principal."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthenticated("Unauthorized")
    return provider.verify_id_token(credentials.credentials)


def check_admin_role(principal: Principal = Depends(get_principal), db: Session = Depends(get_db)) -> User:
    """Ensure the caller is an admin or moderator."""
    return RoleService.require_staff(principal.id, db)


@router.get("/me", response_model=MeResponse)
def read_me(principal: Principal = Depends(get_principal), db: Session = Depends(get_db)):
    """Return the caller's verified identity and stored profile, if any."""
    user = db.get(User, principal.id)
    return MeResponse(
        id=principal.id,
        claims=principal.claims,
        profile=UserResponse.model_validate(user) if user else None,
    )
