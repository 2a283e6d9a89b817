"""Feature modules for rbac-authz."""
