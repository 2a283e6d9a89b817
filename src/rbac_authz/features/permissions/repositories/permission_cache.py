"""In-memory permission cache.

Maps a principal to its cached ``ResourcePermissionSet``. The cache performs
no freshness checks and never talks to the authority; callers decide whether
an entry is still usable. One instance is created at process start and
passed to everything that needs it.
"""

import logging
from typing import Dict, Optional

from ....utils.locks import ReadWriteLock
from ..entities.snapshots import ResourcePermissionSet

logger = logging.getLogger(__name__)


class PermissionCache:
    """Principal to permission snapshot store guarded by a reader/writer lock."""

    def __init__(self):
        self._lock = ReadWriteLock()
        self._permissions: Dict[str, ResourcePermissionSet] = {}

    def put(self, principal: str, snapshot: ResourcePermissionSet) -> None:
        """Insert or replace the snapshot for a principal; never merges."""
        with self._lock.write_locked():
            self._permissions[principal] = snapshot
        logger.debug(f"Cached permissions for principal {principal}")

    def get(self, principal: str) -> Optional[ResourcePermissionSet]:
        """Return the cached snapshot for a principal, stale or not."""
        with self._lock.read_locked():
            return self._permissions.get(principal)

    def delete(self, principal: str) -> None:
        """Remove the snapshot for a principal; absent principals are ignored."""
        with self._lock.write_locked():
            removed = self._permissions.pop(principal, None)
        if removed is not None:
            logger.debug(f"Cleared cached permissions for principal {principal}")

    def clear(self) -> None:
        """Remove every cached snapshot."""
        with self._lock.write_locked():
            count = len(self._permissions)
            self._permissions.clear()
        logger.info(f"Cleared {count} cached permission snapshots")

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._permissions)
