# src/auth/schemas.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, Dict, Optional


class CamelModel(BaseModel):
    """Base schema serialised with camelCase field names for the mobile client."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Principal(BaseModel):
    """Authenticated caller as vouched for by the identity provider."""
    id: str
    claims: Dict[str, Any] = {}


class UserResponse(CamelModel):
    """Schema for a user profile."""
    id: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    joined_date: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    modified_by: Optional[str] = None


class MeResponse(CamelModel):
    """Schema for the caller's own identity and profile."""
    id: str
    claims: Dict[str, Any]
    profile: Optional[UserResponse] = None
