"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database, a TestClient wired to
it, and a recording mailer instead of SMTP.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_db
from app.main import app
from app.notifications.mailer import SendResult, get_mailer
from app.security.passwords import hash_password
from app.users.auth import create_access_token
from app.users.models import User

PASSWORD = "TestPassword123"


class RecordingMailer:
    def __init__(self):
        self.sent = []
        self.fail_with = None

    def send(self, to, template, data):
        self.sent.append({"to": to, "template": template, "data": data})
        if self.fail_with:
            return SendResult(success=False, error=self.fail_with)
        return SendResult(success=True)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(session_factory, mailer):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(email="owner@example.com", verified=True, password=PASSWORD):
        user = User(
            email=email,
            password=hash_password(password),
            username=email.split("@")[0],
            is_verified=verified,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def bearer(user):
    token = create_access_token(data={"userId": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def headers(user):
    return bearer(user)


@pytest.fixture
def account(client, headers):
    response = client.post(
        "/api/finance/accounts",
        headers=headers,
        json={"name": "Cash", "currency": "USD"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_for():
    return bearer
