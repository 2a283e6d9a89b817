"""Permissions feature for rbac-authz.

Feature-first layout:
- entities/: authority models, permission snapshots and collaborator protocols
- repositories/: the in-memory permission cache
- services/: live checks, role resolution, evaluation and orchestration
"""

from .entities import (
    AccessReviewStatus,
    AccessReviewer,
    AggregatedPermissions,
    ClusterRole,
    ClusterRoleBinding,
    PolicyRule,
    ResourcePermissionSet,
    RoleBindingLister,
    RoleGetter,
    RoleRef,
    Subject,
)
from .repositories import PermissionCache
from .services import (
    AuthorizationService,
    LivePermissionChecker,
    RoleResolver,
    create_authorization_service,
    filter_resources,
    has_permission,
)

__all__ = [
    # Entities
    "AccessReviewStatus",
    "AggregatedPermissions",
    "ClusterRole",
    "ClusterRoleBinding",
    "PolicyRule",
    "ResourcePermissionSet",
    "RoleRef",
    "Subject",

    # Protocols
    "AccessReviewer",
    "RoleBindingLister",
    "RoleGetter",

    # Repositories
    "PermissionCache",

    # Services
    "AuthorizationService",
    "LivePermissionChecker",
    "RoleResolver",
    "create_authorization_service",
    "filter_resources",
    "has_permission",
]
