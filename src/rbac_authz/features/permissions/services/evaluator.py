"""Wildcard-aware evaluation of resolved permissions.

Pure functions over an ``AggregatedPermissions`` snapshot; no I/O.

Evaluation order for ``has_permission``:

1. ``resources["*"]`` granting the verb (or ``"*"``) allows everything,
   whatever the API group or resource.
2. Otherwise the resource's own verbs must grant the verb, and the API group
   (``"core"`` read as ``""``) must list the resource or ``"*"``.
3. Anything else is denied.

The cached path of the live checker matches verbs exactly instead.
"""

from typing import Iterable, List, Optional, Sequence, TypeVar

from ....config.constants import RBACMarkers, Verbs
from ..entities.snapshots import AggregatedPermissions

T = TypeVar("T")


def normalize_api_group(api_group: str) -> str:
    """Map the ``"core"`` alias to the canonical empty API group."""
    if api_group == RBACMarkers.CORE_API_GROUP:
        return RBACMarkers.CORE_API_GROUP_CANONICAL
    return api_group


def _grants(values: Optional[Sequence[str]], wanted: str) -> bool:
    if not values:
        return False
    return wanted in values or RBACMarkers.WILDCARD in values


def has_permission(snapshot: AggregatedPermissions, api_group: str, resource: str, verb: str) -> bool:
    """Check if a resolved snapshot allows ``verb`` on ``resource`` in ``api_group``."""
    if _grants(snapshot.resources.get(RBACMarkers.WILDCARD), verb):
        return True

    if not _grants(snapshot.resources.get(resource), verb):
        return False

    allowed_resources = snapshot.api_groups.get(normalize_api_group(api_group))
    return _grants(allowed_resources, resource)


def filter_resources(
    snapshot: AggregatedPermissions,
    api_group: str,
    resource_type: str,
    items: Iterable[T],
) -> List[T]:
    """Return ``items`` if the snapshot may list ``resource_type``, else nothing.

    All-or-nothing: individual items are not inspected.
    """
    if not has_permission(snapshot, api_group, resource_type, Verbs.LIST):
        return []
    return list(items)
