from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from fairdatause.config import Settings
from fairdatause.database import Database
from fairdatause.main import create_app
from fairdatause.services.applicant_repository import ApplicantRepository
from fairdatause.services.reddit_verifier import RedditVerifier


class FakeReddit:
    """Stands in for Reddit's token and user-about endpoints."""

    def __init__(self) -> None:
        self.existing_users = {"testuser", "validuser", "austrie"}
        self.token_status = 200
        self.token_payload: object = {"access_token": "test-token", "token_type": "bearer"}
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.host == "www.reddit.com":
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"error": "unauthorized"})
            return httpx.Response(200, json=self.token_payload)

        username = request.url.path.split("/")[2]
        if username in self.existing_users:
            return httpx.Response(200, json={"kind": "t2", "data": {"name": username}})
        return httpx.Response(404, json={"message": "Not Found", "error": 404})


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "debug": False,
        "test_database_url": "sqlite://",
        "reddit_client_id": "test_id",
        "reddit_client_secret": "test_secret",
        "ping_message": "test ping",
        "cors_origins": ["*"],
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def reddit() -> FakeReddit:
    return FakeReddit()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings, reddit):
    verifier = RedditVerifier(settings, transport=httpx.MockTransport(reddit.handler))
    application = create_app(settings, verifier=verifier)
    yield application
    application.state.database.dispose()


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def database():
    storage = Database(make_settings())
    yield storage
    storage.dispose()


@pytest.fixture
def repository(database):
    session = database.session()
    yield ApplicantRepository(session)
    session.close()
