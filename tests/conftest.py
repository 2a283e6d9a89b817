"""Pytest configuration and fixtures for rbac-authz tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from rbac_authz.config.settings import AuthzSettings
from rbac_authz.features.permissions.repositories.permission_cache import PermissionCache

from factories import FakeClock


@pytest.fixture
def settings():
    """Settings with the default five minute freshness window."""
    return AuthzSettings(cache_ttl_seconds=300, review_namespace="", principal_subject_kind="User")


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def permission_cache():
    return PermissionCache()


@pytest.fixture
def mock_access_reviewer():
    """Mock access reviewer returning an empty review unless a test says otherwise."""
    reviewer = AsyncMock()
    reviewer.self_review = AsyncMock(return_value=[])
    return reviewer


@pytest.fixture
def mock_binding_lister():
    lister = AsyncMock()
    lister.list_cluster_role_bindings = AsyncMock(return_value=[])
    return lister


@pytest.fixture
def roles():
    """Cluster roles served by ``mock_role_getter``, keyed by name."""
    return {}


@pytest.fixture
def mock_role_getter(roles):
    """Mock role getter serving ``roles`` and failing on unknown names."""

    def get_cluster_role(name: str):
        if name not in roles:
            raise LookupError(f'clusterroles.rbac.authorization.k8s.io "{name}" not found')
        return roles[name]

    getter = AsyncMock()
    getter.get_cluster_role = AsyncMock(side_effect=get_cluster_role)
    return getter
