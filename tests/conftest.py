"""Shared fixtures: in-memory database, API client and token helpers."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IDENTITY_JWKS_URL"] = ""
os.environ["IDENTITY_SECRET"] = "test-secret"
os.environ["IDENTITY_ALGORITHMS"] = "HS256"
os.environ["IDENTITY_AUDIENCE"] = "learning-test"
os.environ["IDENTITY_ISSUER"] = "https://identity.example.test/learning-test"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auth.models import User
from auth.services import IdentityProvider, get_identity_provider
from community.models import Post, Comment
from database import Base, get_db
from main import app
from moderation.models import Report

engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

provider = IdentityProvider(
    secret="test-secret",
    algorithms=["HS256"],
    audience="learning-test",
    issuer="https://identity.example.test/learning-test",
)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_identity_provider] = lambda: provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def auth_header(user_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {provider.issue_token(user_id, **claims)}"}


def make_user(db, user_id, role="student", display_name=None, email=None, status="active", joined_date=None):
    user = User(
        id=user_id,
        role=role,
        display_name=display_name,
        email=email,
        status=status,
        joined_date=joined_date or datetime.utcnow(),
    )
    db.add(user)
    db.commit()
    return user


def make_post(db, post_id, author_id, content="A post", created_at=None):
    post = Post(id=post_id, author_id=author_id, content=content, created_at=created_at or datetime.utcnow())
    db.add(post)
    db.commit()
    return post


def make_comment(db, comment_id, post_id, author_id, content="A comment", created_at=None):
    comment = Comment(
        id=comment_id,
        post_id=post_id,
        author_id=author_id,
        content=content,
        created_at=created_at or datetime.utcnow(),
    )
    db.add(comment)
    db.commit()
    return comment


def make_report(db, report_id, content_type, content_id, reported_by, status="pending", reported_at=None):
    report = Report(
        id=report_id,
        content_type=content_type,
        content_id=content_id,
        reported_by=reported_by,
        status=status,
        reported_at=reported_at or datetime.utcnow(),
    )
    db.add(report)
    db.commit()
    return report


@pytest.fixture
def admin(db):
    return make_user(db, "admin-1", role="admin", display_name="Ada Admin", email="ada@example.com")


@pytest.fixture
def admin_headers(admin):
    return auth_header(admin.id)


def days_ago(days: int) -> datetime:
    return datetime.utcnow() - timedelta(days=days)
