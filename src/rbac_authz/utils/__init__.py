"""Utilities for rbac-authz."""

from .clock import Clock, utc_now
from .locks import ReadWriteLock

__all__ = [
    "Clock",
    "ReadWriteLock",
    "utc_now",
]
