"""Builders for authority payloads and a controllable clock used in tests."""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from rbac_authz.config.constants import SubjectKinds


class FakeClock:
    """Callable clock pinned to a point in time that tests can move."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def user(name: str) -> Dict[str, str]:
    return {"kind": SubjectKinds.USER, "name": name}


def group(name: str) -> Dict[str, str]:
    return {"kind": SubjectKinds.GROUP, "name": name}


def service_account(name: str, namespace: str = "default") -> Dict[str, str]:
    return {"kind": SubjectKinds.SERVICE_ACCOUNT, "name": name, "namespace": namespace}


def make_binding(role_name: str, *subjects: Dict[str, str], name: Optional[str] = None) -> Dict[str, Any]:
    """Cluster role binding payload as decoded from the authority's JSON."""
    return {
        "name": name or f"{role_name}-binding",
        # The authority reports a binding without subjects as null
        "subjects": list(subjects) or None,
        "roleRef": {"apiGroup": "rbac.authorization.k8s.io", "kind": "ClusterRole", "name": role_name},
    }


def rule(api_groups: List[str], resources: List[str], verbs: List[str]) -> Dict[str, List[str]]:
    return {"apiGroups": api_groups, "resources": resources, "verbs": verbs}


def make_role(name: str, *rules: Dict[str, List[str]]) -> Dict[str, Any]:
    """Cluster role payload as decoded from the authority's JSON."""
    return {"name": name, "rules": list(rules)}
