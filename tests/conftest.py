from unittest.mock import MagicMock

import pytest

from backend.app import create_app
from backend.auth.identity import AuthenticationError, Identity
from backend.repositories.document_repository import DocumentRepository

VALID_TOKEN = "valid-token"
TEST_UID = "some_id"


class StubVerifier:
    """Accepts only VALID_TOKEN."""

    def __init__(self, uid=TEST_UID):
        self.uid = uid
        self.tokens = []

    def verify(self, token):
        self.tokens.append(token)
        if token != VALID_TOKEN:
            raise AuthenticationError("unknown token")
        return Identity(uid=self.uid)


@pytest.fixture
def database():
    return MagicMock(name="database")


@pytest.fixture
def collection(database):
    return database.__getitem__.return_value


@pytest.fixture
def repository(database):
    return DocumentRepository(lambda: database)


@pytest.fixture
def verifier():
    return StubVerifier()


@pytest.fixture
def app(repository, verifier):
    return create_app(
        {"TESTING": True, "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256"},
        repository=repository,
        verifier=verifier,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
