"""Authorization service orchestrating live checks, resolution and caching.

Constructed once at process start around a single ``PermissionCache`` and
the three authority collaborators, then passed to every caller.
"""

import logging
from typing import Iterable, List, Optional, TypeVar

from ....config.settings import AuthzSettings, get_settings
from ....utils.clock import Clock, utc_now
from ..entities.protocols import AccessReviewer, RoleBindingLister, RoleGetter
from ..entities.snapshots import AggregatedPermissions, ResourcePermissionSet
from ..repositories.permission_cache import PermissionCache
from . import evaluator
from .live_checker import LivePermissionChecker
from .role_resolver import RoleResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthorizationService:
    """Entry point for authorization decisions."""

    def __init__(
        self,
        cache: PermissionCache,
        access_reviewer: AccessReviewer,
        binding_lister: RoleBindingLister,
        role_getter: RoleGetter,
        settings: Optional[AuthzSettings] = None,
        clock: Optional[Clock] = None,
    ):
        settings = settings or get_settings()
        self.cache = cache
        self.clock = clock or utc_now
        self.live_checker = LivePermissionChecker(cache, access_reviewer, settings, self.clock)
        self.role_resolver = RoleResolver(binding_lister, role_getter, settings)

    # Live path

    async def check_permission(self, principal: str, resource_type: str, verb: str) -> bool:
        """Cached-or-live check of a single (resource type, verb)."""
        return await self.live_checker.check_permission(principal, resource_type, verb)

    # Bulk path

    async def resolve_permissions(self, principal: str) -> AggregatedPermissions:
        """Resolve the principal's full permission snapshot from role bindings."""
        return await self.role_resolver.resolve_permissions(principal)

    async def has_permission(self, principal: str, api_group: str, resource: str, verb: str) -> bool:
        """Resolve the principal's permissions and evaluate one request against them."""
        permissions = await self.resolve_permissions(principal)
        return evaluator.has_permission(permissions, api_group, resource, verb)

    async def filter_resources(
        self,
        principal: str,
        api_group: str,
        resource_type: str,
        items: Iterable[T],
    ) -> List[T]:
        """Return ``items`` only if the principal may list ``resource_type``."""
        permissions = await self.resolve_permissions(principal)
        return evaluator.filter_resources(permissions, api_group, resource_type, items)

    # Cache management

    async def warm_cache(self, principal: str) -> ResourcePermissionSet:
        """Resolve the principal's permissions and store them in the cache.

        Only the resource to verbs mapping is cached. Cached lookups match
        verbs exactly, so a resolved ``"*"`` verb stays a literal ``"*"``.
        """
        permissions = await self.resolve_permissions(principal)
        snapshot = ResourcePermissionSet.from_aggregated(permissions, self.clock())
        self.cache.put(principal, snapshot)
        logger.info(
            f"Warmed permission cache for {principal} with "
            f"{len(snapshot.resource_permissions)} resource types"
        )
        return snapshot

    def invalidate(self, principal: str) -> None:
        """Drop the principal's cached permissions."""
        self.cache.delete(principal)
        logger.info(f"Invalidated permission cache for {principal}")


def create_authorization_service(
    access_reviewer: AccessReviewer,
    binding_lister: RoleBindingLister,
    role_getter: RoleGetter,
    cache: Optional[PermissionCache] = None,
    settings: Optional[AuthzSettings] = None,
    clock: Optional[Clock] = None,
) -> AuthorizationService:
    """Create an authorization service, with a new cache unless one is given.

    Args:
        access_reviewer: Live self-review primitive of the authority
        binding_lister: Cluster role binding listing primitive
        role_getter: Cluster role lookup primitive
        cache: Optional cache shared with other components
        settings: Optional settings; defaults to environment settings
        clock: Optional clock returning timezone-aware datetimes

    Returns:
        Configured AuthorizationService instance
    """
    return AuthorizationService(
        cache=cache if cache is not None else PermissionCache(),
        access_reviewer=access_reviewer,
        binding_lister=binding_lister,
        role_getter=role_getter,
        settings=settings,
        clock=clock,
    )
