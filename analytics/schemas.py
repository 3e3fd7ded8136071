# src/analytics/schemas.py
from datetime import datetime
from typing import Dict
from auth.schemas import CamelModel


class CommunityStats(CamelModel):
    """Schema for community engagement over a trailing window."""
    period: str
    total_users: int
    active_users: int
    total_posts: int
    total_comments: int
    engagement_rate: float


class RecentActivity(CamelModel):
    new_users: int
    new_posts: int


class SystemHealth(CamelModel):
    status: str
    uptime: float
    timestamp: datetime


class SystemStats(CamelModel):
    """Schema for the admin dashboard summary."""
    total_users: int
    total_posts: int
    pending_reports: int
    role_distribution: Dict[str, int]
    recent_activity: RecentActivity
    system_health: SystemHealth
