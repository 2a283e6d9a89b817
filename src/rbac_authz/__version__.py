"""Version information for rbac-authz."""

__version__ = "0.1.0"
