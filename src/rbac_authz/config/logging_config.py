"""Centralized logging configuration for rbac-authz.

Provides consistent, configurable logging with environment-based control over
verbosity and log levels.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that stay quiet unless authz logging is enabled
    AUTHZ_MODULES = [
        "rbac_authz.features.permissions.repositories",
        "rbac_authz.features.permissions.services",
    ]

    FORMATS = {
        LogFormat.JSON.value: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
        LogFormat.DETAILED.value: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        LogFormat.SIMPLE.value: "%(asctime)s - %(levelname)s - %(message)s",
    }

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL").upper()
        log_format = os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower()
        enable_authz_logging = os.getenv("ENABLE_AUTHZ_LOGGING", "false").lower() == "true"

        # An explicit LOG_LEVEL wins over the verbosity mode
        effective_log_level = os.getenv("LOG_LEVEL", "").upper()
        if effective_log_level not in LogLevel.__members__:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)

        format_string = cls.FORMATS.get(log_format, cls.FORMATS[LogFormat.SIMPLE.value])

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        if not enable_authz_logging:
            for module in cls.AUTHZ_MODULES:
                logging_config["loggers"][module] = {
                    "level": "WARNING" if effective_log_level != "DEBUG" else "DEBUG",
                }

        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        if effective_log_level == "DEBUG":
            logger.debug(f"Logging configured: level={effective_log_level}, format={log_format}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name."""
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module."""
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggingConfig.get_logger(name)
