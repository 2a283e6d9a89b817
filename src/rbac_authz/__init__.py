"""rbac-authz - cached authorization decisions over an RBAC authority.

Answers whether a principal may perform a verb on a resource type, either
through a cached-or-live single check or by resolving and evaluating every
role bound to the principal.
"""

from .__version__ import __version__

from .config import AuthzSettings, get_settings, setup_logging
from .core.exceptions import AuthorityError, RbacAuthzError
from .features.permissions import (
    AccessReviewStatus,
    AccessReviewer,
    AggregatedPermissions,
    AuthorizationService,
    ClusterRole,
    ClusterRoleBinding,
    LivePermissionChecker,
    PermissionCache,
    PolicyRule,
    ResourcePermissionSet,
    RoleBindingLister,
    RoleGetter,
    RoleRef,
    RoleResolver,
    Subject,
    create_authorization_service,
    filter_resources,
    has_permission,
)

__all__ = [
    "__version__",

    # Configuration
    "AuthzSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "AuthorityError",
    "RbacAuthzError",

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

    # Cache and services
    "AuthorizationService",
    "LivePermissionChecker",
    "PermissionCache",
    "RoleResolver",
    "create_authorization_service",
    "filter_resources",
    "has_permission",
]
