"""Tests for community and system statistics."""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from analytics.services import AnalyticsService, engagement_rate, resolve_period
from errors import UpstreamError
from conftest import days_ago, make_comment, make_post, make_report, make_user


def test_resolve_period():
    assert resolve_period("7d") == ("7d", 7)
    assert resolve_period("30d") == ("30d", 30)
    assert resolve_period("90d") == ("90d", 90)
    assert resolve_period("1y") == ("90d", 90)


def test_engagement_rate():
    assert engagement_rate(0, 0) == 0
    assert engagement_rate(5, 0) == 0
    assert engagement_rate(1, 3) == 33.33
    assert engagement_rate(3, 3) == 100


def test_community_stats_without_users(db):
    stats = AnalyticsService.community_stats("7d", db)
    assert stats.total_users == 0
    assert stats.engagement_rate == 0
    assert stats.total_posts == 0
    assert stats.total_comments == 0


def test_community_stats_counts_distinct_active_users(client, db, admin_headers):
    make_user(db, "alice")
    make_user(db, "bob")
    make_user(db, "carol")
    make_post(db, "p1", "alice", created_at=days_ago(1))
    make_post(db, "p2", "alice", created_at=days_ago(2))
    make_post(db, "old", "carol", created_at=days_ago(20))
    make_comment(db, "c1", "p1", "alice", created_at=days_ago(1))
    make_comment(db, "c2", "p1", "bob", created_at=days_ago(1))
    make_comment(db, "c3", "p2", "bob", created_at=days_ago(1))
    make_comment(db, "c4", "old", "carol", created_at=days_ago(1))

    response = client.get("/admin/community-stats", params={"period": "7d"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "period": "7d",
        "totalUsers": 4,
        "activeUsers": 2,
        "totalPosts": 2,
        "totalComments": 3,
        "engagementRate": 50.0,
    }


def test_community_stats_wider_window(client, db, admin_headers):
    make_post(db, "p1", "alice", created_at=days_ago(1))
    make_post(db, "old", "carol", created_at=days_ago(20))
    make_comment(db, "c4", "old", "carol", created_at=days_ago(25))

    body = client.get("/admin/community-stats", params={"period": "30d"}, headers=admin_headers).json()

    assert body["totalPosts"] == 2
    assert body["totalComments"] == 1
    assert body["activeUsers"] == 2


def test_community_stats_default_and_unknown_period(client, db, admin_headers):
    make_post(db, "p1", "alice", created_at=days_ago(60))

    default = client.get("/admin/community-stats", headers=admin_headers).json()
    assert default["period"] == "7d"
    assert default["totalPosts"] == 0

    unknown = client.get("/admin/community-stats", params={"period": "forever"}, headers=admin_headers).json()
    assert unknown["period"] == "90d"
    assert unknown["totalPosts"] == 1


def test_system_stats(client, db, admin_headers):
    make_user(db, "s1", role="student")
    make_user(db, "s2", role=None)
    make_user(db, "m1", role="moderator", joined_date=days_ago(30))
    make_post(db, "p1", "s1", created_at=days_ago(1))
    make_post(db, "p2", "s1", created_at=days_ago(10))
    make_report(db, "r1", "post", "p1", "s2")
    make_report(db, "r2", "post", "p2", "s2", status="rejected")

    response = client.get("/admin/stats", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["totalUsers"] == 4
    assert body["totalPosts"] == 2
    assert body["pendingReports"] == 1
    assert body["roleDistribution"] == {"admin": 1, "student": 2, "moderator": 1}
    assert body["recentActivity"] == {"newUsers": 3, "newPosts": 1}
    assert body["systemHealth"]["status"] == "healthy"
    assert body["systemHealth"]["uptime"] >= 0


def test_system_stats_fails_as_a_whole():
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT count(*) FROM users", {}, Exception("connection lost"))

    with pytest.raises(UpstreamError) as excinfo:
        AnalyticsService.system_stats(db)

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == "Failed to get system stats: OperationalError"
    assert "SELECT" not in excinfo.value.detail
    assert "connection lost" not in excinfo.value.detail


def test_store_failure_is_reported_as_json(client, admin_headers, monkeypatch):
    def broken(period, db):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(AnalyticsService, "community_stats", staticmethod(broken))

    response = client.get("/admin/community-stats", headers=admin_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Document store error"}
