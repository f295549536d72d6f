"""
Tests for token verification and user resolution.
"""

import pytest
from datetime import timedelta

from jobtrack.core.exceptions import AuthenticationException, InvalidTokenException
from jobtrack.core.security import SecurityManager
from tests.conftest import make_token


@pytest.fixture
def manager() -> SecurityManager:
    return SecurityManager()


@pytest.mark.unit
class TestSecurityManager:

    def test_round_trip(self, manager):
        token = make_token("user-1")

        user = manager.resolve_user(manager.verify_token(token))

        assert user.user_id == "user-1"
        assert user.test_user is False

    def test_expired_token(self, manager):
        token = make_token("user-1", expires_delta=timedelta(minutes=-5))

        with pytest.raises(InvalidTokenException):
            manager.verify_token(token)

    def test_wrong_secret(self, manager):
        token = make_token("user-1", secret_key="another-secret")

        with pytest.raises(InvalidTokenException):
            manager.verify_token(token)

    def test_missing_subject(self, manager):
        with pytest.raises(AuthenticationException):
            manager.resolve_user({"email": "someone@example.com"})

    def test_test_user_claim(self, manager):
        assert manager.resolve_user({"sub": "user-1", "test_user": True}).test_user is True

    def test_configured_demo_user(self, manager):
        manager.demo_user_id = "demo"

        assert manager.resolve_user({"sub": "demo"}).test_user is True
        assert manager.resolve_user({"sub": "user-1"}).test_user is False
