"""Permission entities: authority models, snapshots and protocols."""

from .rbac import (
    AccessReviewStatus,
    AuthorityModel,
    ClusterRole,
    ClusterRoleBinding,
    PolicyRule,
    RoleRef,
    Subject,
    coerce,
)
from .snapshots import AggregatedPermissions, ResourcePermissionSet
from .protocols import AccessReviewer, RoleBindingLister, RoleGetter

__all__ = [
    # Authority models
    "AccessReviewStatus",
    "AuthorityModel",
    "ClusterRole",
    "ClusterRoleBinding",
    "PolicyRule",
    "RoleRef",
    "Subject",
    "coerce",

    # Snapshots
    "AggregatedPermissions",
    "ResourcePermissionSet",

    # Protocols
    "AccessReviewer",
    "RoleBindingLister",
    "RoleGetter",
]
