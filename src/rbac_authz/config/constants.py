"""Constants for rbac-authz.

RBAC markers, subject kinds and cache TTL values shared by the permission
feature. The values mirror the vocabulary of the RBAC authority.
"""

from typing import Final


class RBACMarkers:
    """Special values with meaning in RBAC rules."""

    WILDCARD: Final[str] = "*"
    CORE_API_GROUP: Final[str] = "core"
    CORE_API_GROUP_CANONICAL: Final[str] = ""


class SubjectKinds:
    """Subject kinds that can appear in a role binding."""

    USER: Final[str] = "User"
    GROUP: Final[str] = "Group"
    SERVICE_ACCOUNT: Final[str] = "ServiceAccount"


class Verbs:
    """Verbs the package evaluates on its own behalf."""

    LIST: Final[str] = "list"


class CacheTTL:
    """Cache TTL values in seconds."""

    PERMISSIONS: Final[int] = 300  # 5 minutes


class DefaultReview:
    """Defaults passed to the live self-review primitive."""

    NAMESPACE: Final[str] = ""
    API_GROUP: Final[str] = ""
