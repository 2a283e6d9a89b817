"""Resolution of a principal's permissions from role bindings.

Lists every cluster role binding, fetches the role of each binding whose
subjects include the principal as a user, and folds the role rules into one
``AggregatedPermissions`` snapshot:

- every API group of a rule (``"*"`` recorded as ``"core"``) accumulates the
  rule's resources, duplicates included;
- every resource of a rule (``"*"`` included) is overwritten with the rule's
  verbs, so the last rule processed wins.

The snapshot is never cached. Any authority failure aborts the resolution.
"""

import logging
from typing import List, Optional, Sequence

from ....config.constants import RBACMarkers
from ....config.settings import AuthzSettings, get_settings
from ....core.exceptions import AuthorityError
from ..entities.protocols import RoleBindingLister, RoleGetter
from ..entities.rbac import ClusterRole, ClusterRoleBinding, PolicyRule, coerce
from ..entities.snapshots import AggregatedPermissions

logger = logging.getLogger(__name__)


class RoleResolver:
    """Builds aggregated permission snapshots from the authority's role data."""

    def __init__(
        self,
        binding_lister: RoleBindingLister,
        role_getter: RoleGetter,
        settings: Optional[AuthzSettings] = None,
    ):
        settings = settings or get_settings()
        self.binding_lister = binding_lister
        self.role_getter = role_getter
        self.subject_kind = settings.principal_subject_kind

    async def resolve_permissions(self, principal: str) -> AggregatedPermissions:
        """Resolve every permission granted to ``principal`` through cluster role bindings.

        Raises:
            AuthorityError: listing bindings or fetching any bound role failed.
        """
        permissions = AggregatedPermissions()
        matched_roles = 0

        for binding in await self._list_bindings(principal):
            for subject in binding.subjects:
                if not subject.designates(principal, self.subject_kind):
                    continue
                role = await self._get_role(principal, binding.role_ref.name)
                self._fold_rules(permissions, role.rules)
                matched_roles += 1

        logger.debug(
            f"Resolved {len(permissions.resources)} resource grants from "
            f"{matched_roles} roles for {principal}"
        )
        return permissions

    @staticmethod
    def _fold_rules(permissions: AggregatedPermissions, rules: Sequence[PolicyRule]) -> None:
        for rule in rules:
            for api_group in rule.api_groups:
                if api_group == RBACMarkers.WILDCARD:
                    api_group = RBACMarkers.CORE_API_GROUP
                permissions.add_group_resources(api_group, rule.resources)

            for resource in rule.resources:
                permissions.set_verbs(resource, rule.verbs)

    async def _list_bindings(self, principal: str) -> List[ClusterRoleBinding]:
        try:
            bindings = await self.binding_lister.list_cluster_role_bindings()
            return [coerce(ClusterRoleBinding, binding) for binding in bindings or []]
        except Exception as e:
            logger.error(f"Failed to list ClusterRoleBindings while resolving {principal}: {e}")
            raise AuthorityError(
                f"failed to list ClusterRoleBindings: {e}",
                operation="list_cluster_role_bindings",
                principal=principal,
            ) from e

    async def _get_role(self, principal: str, role_name: str) -> ClusterRole:
        try:
            return coerce(ClusterRole, await self.role_getter.get_cluster_role(role_name))
        except Exception as e:
            logger.error(f"Failed to get ClusterRole {role_name} for {principal}: {e}")
            raise AuthorityError(
                f"failed to get ClusterRole {role_name}: {e}",
                operation="get_cluster_role",
                principal=principal,
                role=role_name,
            ) from e
