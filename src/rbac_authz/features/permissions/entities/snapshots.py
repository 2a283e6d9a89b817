"""Permission snapshots.

Two shapes of a resolved permission set:

- ``ResourcePermissionSet`` is what the permission cache stores. It is
  immutable and is replaced wholesale on refresh.
- ``AggregatedPermissions`` is what the role resolver builds from role
  bindings. It is built fresh for each resolution and never cached.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ResourcePermissionSet:
    """Cached permissions of a principal: resource type to allowed verbs.

    Naive ``last_checked`` timestamps are taken to be UTC.
    """

    resource_permissions: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)
    last_checked: Optional[datetime] = None

    def __post_init__(self):
        """Store a read-only copy with tuple verb sequences."""
        object.__setattr__(
            self,
            "resource_permissions",
            MappingProxyType(
                {resource: tuple(verbs) for resource, verbs in self.resource_permissions.items()}
            ),
        )
        if self.last_checked is not None and self.last_checked.tzinfo is None:
            object.__setattr__(self, "last_checked", self.last_checked.replace(tzinfo=timezone.utc))

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        """Check if the snapshot is still within its freshness window."""
        if self.last_checked is None:
            return False
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now - self.last_checked <= ttl

    def allows(self, resource_type: str, verb: str) -> bool:
        """Exact verb lookup; ``"*"`` has no special meaning here."""
        return verb in self.resource_permissions.get(resource_type, ())

    @classmethod
    def from_aggregated(cls, aggregated: "AggregatedPermissions", checked_at: datetime) -> "ResourcePermissionSet":
        """Build a cache snapshot from the resources of a resolved permission set."""
        return cls(resource_permissions=aggregated.resources, last_checked=checked_at)


@dataclass
class AggregatedPermissions:
    """Permissions folded from every role bound to a principal.

    ``resources`` maps a resource type to the verbs of the last rule that
    named it. ``api_groups`` maps an API group to every resource listed by
    rules for that group, duplicates included.
    """

    resources: Dict[str, List[str]] = field(default_factory=dict)
    api_groups: Dict[str, List[str]] = field(default_factory=dict)

    def set_verbs(self, resource: str, verbs: Sequence[str]) -> None:
        self.resources[resource] = list(verbs)

    def add_group_resources(self, api_group: str, resources: Sequence[str]) -> None:
        self.api_groups.setdefault(api_group, []).extend(resources)

    def is_empty(self) -> bool:
        return not self.resources and not self.api_groups
