"""Configuration for rbac-authz: settings, constants and logging."""

from .constants import CacheTTL, DefaultReview, RBACMarkers, SubjectKinds, Verbs
from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity, get_logger, setup_logging
from .settings import AuthzSettings, get_settings

__all__ = [
    # Settings
    "AuthzSettings",
    "get_settings",

    # Constants
    "CacheTTL",
    "DefaultReview",
    "RBACMarkers",
    "SubjectKinds",
    "Verbs",

    # Logging
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
]
