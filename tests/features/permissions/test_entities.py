"""Tests for authority models and permission snapshots."""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError
from types import SimpleNamespace

from rbac_authz.features.permissions.entities.rbac import (
    AccessReviewStatus,
    ClusterRole,
    ClusterRoleBinding,
    PolicyRule,
    coerce,
)
from rbac_authz.features.permissions.entities.snapshots import AggregatedPermissions, ResourcePermissionSet

from factories import group, make_binding, make_role, rule, user

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestAuthorityModels:
    """Test parsing of authority payloads."""

    def test_binding_from_wire_payload(self):
        binding = ClusterRoleBinding.model_validate(make_binding("view", user("alice"), group("ops")))

        assert binding.role_ref.name == "view"
        assert binding.role_ref.kind == "ClusterRole"
        assert [s.kind for s in binding.subjects] == ["User", "Group"]
        assert binding.subjects[0].designates("alice")
        assert not binding.subjects[1].designates("ops")

    def test_binding_with_null_subjects(self):
        binding = ClusterRoleBinding.model_validate(make_binding("view"))

        assert binding.subjects == []

    def test_binding_requires_role_ref(self):
        with pytest.raises(ValidationError):
            ClusterRoleBinding.model_validate({"subjects": []})

    def test_role_from_wire_payload(self):
        role = ClusterRole.model_validate(make_role("edit", rule(["", "apps"], ["pods"], ["get"])))

        assert role.rules == [PolicyRule(api_groups=["", "apps"], resources=["pods"], verbs=["get"])]

    def test_rule_null_lists(self):
        parsed = PolicyRule.model_validate({"apiGroups": None, "resources": ["pods"], "verbs": None})

        assert parsed.api_groups == []
        assert parsed.verbs == []

    def test_role_with_null_rules(self):
        assert ClusterRole.model_validate({"name": "empty", "rules": None}).rules == []

    def test_models_are_frozen(self):
        status = AccessReviewStatus(allowed=True)

        with pytest.raises(ValidationError):
            status.allowed = False

    def test_coerce_keeps_instances(self):
        status = AccessReviewStatus(allowed=True)

        assert coerce(AccessReviewStatus, status) is status

    def test_coerce_from_attributes(self):
        raw = SimpleNamespace(allowed=False, reason="forbidden", evaluation_error=None)

        assert coerce(AccessReviewStatus, raw) == AccessReviewStatus(allowed=False, reason="forbidden")


class TestResourcePermissionSet:
    """Test the cache snapshot."""

    def test_copies_and_freezes_verbs(self):
        verbs = ["get"]
        snapshot = ResourcePermissionSet(resource_permissions={"pods": verbs}, last_checked=NOW)
        verbs.append("delete")

        assert snapshot.resource_permissions == {"pods": ("get",)}

    def test_permissions_are_read_only(self):
        snapshot = ResourcePermissionSet(resource_permissions={"pods": ["get"]}, last_checked=NOW)

        with pytest.raises(TypeError):
            snapshot.resource_permissions["pods"] = ("*",)
        with pytest.raises(TypeError):
            del snapshot.resource_permissions["pods"]

        assert snapshot.allows("pods", "get")
        assert not snapshot.allows("pods", "*")

    def test_equal_snapshots_hash_alike(self):
        first = ResourcePermissionSet(resource_permissions={"pods": ["get"]}, last_checked=NOW)
        second = ResourcePermissionSet(resource_permissions={"pods": ("get",)}, last_checked=NOW)

        assert first == second
        assert hash(first) == hash(second)

    def test_naive_timestamp_taken_as_utc(self):
        snapshot = ResourcePermissionSet(last_checked=NOW.replace(tzinfo=None))

        assert snapshot.last_checked == NOW
        assert snapshot.last_checked.tzinfo is timezone.utc
        assert snapshot.is_fresh(NOW, timedelta(minutes=5))

    def test_freshness_window(self):
        snapshot = ResourcePermissionSet(resource_permissions={}, last_checked=NOW)
        ttl = timedelta(minutes=5)

        assert snapshot.is_fresh(NOW + ttl, ttl)
        assert not snapshot.is_fresh(NOW + ttl + timedelta(microseconds=1), ttl)

    def test_never_checked_is_stale(self):
        assert not ResourcePermissionSet().is_fresh(NOW, timedelta(minutes=5))

    def test_allows_is_exact(self):
        snapshot = ResourcePermissionSet(resource_permissions={"pods": ["get", "*"]}, last_checked=NOW)

        assert snapshot.allows("pods", "get")
        assert snapshot.allows("pods", "*")
        assert not snapshot.allows("pods", "list")
        assert not snapshot.allows("services", "get")

    def test_from_aggregated(self):
        aggregated = AggregatedPermissions(resources={"pods": ["get"]}, api_groups={"": ["pods"]})

        snapshot = ResourcePermissionSet.from_aggregated(aggregated, NOW)
        aggregated.resources["pods"].append("delete")

        assert snapshot == ResourcePermissionSet(resource_permissions={"pods": ["get"]}, last_checked=NOW)


class TestAggregatedPermissions:
    """Test the resolver snapshot helpers."""

    def test_set_verbs_overwrites(self):
        permissions = AggregatedPermissions()
        permissions.set_verbs("pods", ["get"])
        permissions.set_verbs("pods", ["list"])

        assert permissions.resources == {"pods": ["list"]}

    def test_add_group_resources_appends(self):
        permissions = AggregatedPermissions()
        permissions.add_group_resources("", ["pods"])
        permissions.add_group_resources("", ["pods", "services"])

        assert permissions.api_groups == {"": ["pods", "pods", "services"]}
