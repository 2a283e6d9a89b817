"""Live permission checks backed by the permission cache.

A fresh cache entry answers with an exact verb lookup. A missing or stale
entry falls through to the authority's self-review primitive, whose answer
is returned as-is and is not written back; populating the cache is a
separate step (see ``AuthorizationService.warm_cache``).
"""

import logging
from datetime import timedelta
from typing import Optional

from ....config.constants import DefaultReview
from ....config.settings import AuthzSettings, get_settings
from ....core.exceptions import AuthorityError
from ....utils.clock import Clock, utc_now
from ..entities.protocols import AccessReviewer
from ..entities.rbac import AccessReviewStatus, coerce
from ..repositories.permission_cache import PermissionCache

logger = logging.getLogger(__name__)


class LivePermissionChecker:
    """Answers single (resource type, verb) questions for a principal."""

    def __init__(
        self,
        cache: PermissionCache,
        access_reviewer: AccessReviewer,
        settings: Optional[AuthzSettings] = None,
        clock: Optional[Clock] = None,
    ):
        settings = settings or get_settings()
        self.cache = cache
        self.access_reviewer = access_reviewer
        self.ttl: timedelta = settings.cache_ttl
        self.namespace = settings.review_namespace
        self.clock = clock or utc_now

    async def check_permission(self, principal: str, resource_type: str, verb: str) -> bool:
        """Check if ``principal`` may perform ``verb`` on ``resource_type``.

        Raises:
            AuthorityError: the live check was needed and the authority failed.
                A stale cache entry is never used as a fallback.
        """
        # The cache read releases its lock before any authority call
        permissions = self.cache.get(principal)

        if permissions is None or not permissions.is_fresh(self.clock(), self.ttl):
            logger.debug(
                f"No fresh cached permissions for {principal}, running live check "
                f"for {verb} on {resource_type}"
            )
            return await self._review(principal, resource_type, verb)

        allowed = permissions.allows(resource_type, verb)
        logger.debug(f"Cached permission {verb} on {resource_type} for {principal}: {allowed}")
        return allowed

    async def _review(self, principal: str, resource_type: str, verb: str) -> bool:
        try:
            review = await self.access_reviewer.self_review(
                self.namespace, DefaultReview.API_GROUP, resource_type, [verb]
            )
            if not review:
                return False
            status = coerce(AccessReviewStatus, review[0])
        except Exception as e:
            logger.error(f"Error checking permissions for user {principal} on resource {resource_type}: {e}")
            raise AuthorityError(
                f"Error checking permissions: {e}",
                operation="self_review",
                principal=principal,
                resource=resource_type,
                verb=verb,
            ) from e

        return status.allowed
