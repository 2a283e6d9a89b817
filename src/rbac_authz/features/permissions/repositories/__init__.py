"""Permission repositories."""

from .permission_cache import PermissionCache

__all__ = ["PermissionCache"]
