"""Core building blocks shared across rbac-authz features."""

from .exceptions import AuthorityError, RbacAuthzError

__all__ = [
    "AuthorityError",
    "RbacAuthzError",
]
