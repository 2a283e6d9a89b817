"""Protocol interfaces for the RBAC authority.

The authority is an external collaborator: this package consumes these three
primitives and never implements transport to them. Implementations may
return the models from ``rbac`` or the raw mappings decoded from the
authority's JSON; both are accepted.
"""

from abc import abstractmethod
from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable

from .rbac import AccessReviewStatus, ClusterRole, ClusterRoleBinding


@runtime_checkable
class AccessReviewer(Protocol):
    """Live single-permission self-review."""

    @abstractmethod
    async def self_review(
        self,
        namespace: str,
        api_group: str,
        resource: str,
        verbs: Sequence[str],
    ) -> Sequence[Union[AccessReviewStatus, Mapping[str, Any]]]:
        """Ask the authority whether the caller may perform ``verbs`` on ``resource``."""
        ...


@runtime_checkable
class RoleBindingLister(Protocol):
    """Listing of every cluster role binding visible to the caller."""

    @abstractmethod
    async def list_cluster_role_bindings(self) -> Sequence[Union[ClusterRoleBinding, Mapping[str, Any]]]:
        """Return all cluster role bindings."""
        ...


@runtime_checkable
class RoleGetter(Protocol):
    """Lookup of a cluster role definition by name."""

    @abstractmethod
    async def get_cluster_role(self, name: str) -> Union[ClusterRole, Mapping[str, Any]]:
        """Return the named cluster role; fails if it does not exist."""
        ...
