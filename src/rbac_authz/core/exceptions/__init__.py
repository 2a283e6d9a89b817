"""Exception hierarchy for rbac-authz."""

from .base import RbacAuthzError
from .authority import AuthorityError

__all__ = [
    "RbacAuthzError",
    "AuthorityError",
]
