"""Permission services: live checks, role resolution and evaluation."""

from .evaluator import filter_resources, has_permission, normalize_api_group
from .live_checker import LivePermissionChecker
from .role_resolver import RoleResolver
from .authorization_service import AuthorizationService, create_authorization_service

__all__ = [
    "AuthorizationService",
    "LivePermissionChecker",
    "RoleResolver",
    "create_authorization_service",
    "filter_resources",
    "has_permission",
    "normalize_api_group",
]
