# tests/test_auth_service.py
"""Unit tests for the credential check."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))

import pytest
from unittest.mock import MagicMock
from gatepass.services.auth_service import AuthService, check_credentials
from gatepass.utils.exceptions import AuthFailedError
from fakes import seeded_snapshot


class TestCheckCredentials:
    def test_match_returns_profile_without_password(self):
        profile = check_credentials(seeded_snapshot().users, "moderator1", "moderator123")
        assert profile.role == "moderator"
        assert profile.name == "Moderator One"
        assert "password" not in profile.model_dump()

    def test_wrong_password_fails(self):
        with pytest.raises(AuthFailedError) as exc:
            check_credentials(seeded_snapshot().users, "student1", "wrong")
        assert exc.value.status_code == 401
        assert exc.value.message == "Invalid username or password"

    def test_password_of_another_user_fails(self):
        with pytest.raises(AuthFailedError):
            check_credentials(seeded_snapshot().users, "student1", "moderator123")

    def test_comparison_is_exact(self):
        with pytest.raises(AuthFailedError):
            check_credentials(seeded_snapshot().users, "Student1", "student123")


class TestAuthService:
    def test_login_reads_users_from_store(self):
        store = MagicMock()
        store.load.return_value = seeded_snapshot()
        profile = AuthService().login(store, "gatekeeper1", "gatekeeper123")
        assert profile.role == "gatekeeper"
        store.load.assert_called_once()

    def test_login_failure_propagates(self):
        store = MagicMock()
        store.load.return_value = seeded_snapshot()
        with pytest.raises(AuthFailedError):
            AuthService().login(store, "gatekeeper1", "nope")
