"""Tests for authz settings."""

import pytest
from datetime import timedelta
from pydantic import ValidationError

from rbac_authz.config.settings import AuthzSettings, get_settings


class TestAuthzSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("RBAC_AUTHZ_CACHE_TTL_SECONDS", "RBAC_AUTHZ_REVIEW_NAMESPACE", "RBAC_AUTHZ_PRINCIPAL_SUBJECT_KIND"):
            monkeypatch.delenv(name, raising=False)

        settings = AuthzSettings(_env_file=None)

        assert settings.cache_ttl_seconds == 300
        assert settings.cache_ttl == timedelta(minutes=5)
        assert settings.review_namespace == ""
        assert settings.principal_subject_kind == "User"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RBAC_AUTHZ_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("RBAC_AUTHZ_REVIEW_NAMESPACE", "team-a")

        settings = AuthzSettings(_env_file=None)

        assert settings.cache_ttl == timedelta(seconds=60)
        assert settings.review_namespace == "team-a"

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_ttl_must_be_positive(self, ttl):
        with pytest.raises(ValidationError):
            AuthzSettings(cache_ttl_seconds=ttl, _env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
