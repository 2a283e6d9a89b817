"""Settings for rbac-authz.

Environment-driven configuration using pydantic-settings. All variables are
prefixed with ``RBAC_AUTHZ_`` and may also be supplied through a ``.env`` file.
"""

import logging
from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CacheTTL, DefaultReview, SubjectKinds

logger = logging.getLogger(__name__)


class AuthzSettings(BaseSettings):
    """Authorization settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="RBAC_AUTHZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Cache configuration
    cache_ttl_seconds: int = Field(default=CacheTTL.PERMISSIONS, gt=0)

    # Live review configuration
    review_namespace: str = Field(default=DefaultReview.NAMESPACE)

    # Role binding matching
    principal_subject_kind: str = Field(default=SubjectKinds.USER, min_length=1)

    @property
    def cache_ttl(self) -> timedelta:
        """Freshness window of a cached permission snapshot."""
        return timedelta(seconds=self.cache_ttl_seconds)


@lru_cache()
def get_settings() -> AuthzSettings:
    """Get cached settings instance."""
    settings = AuthzSettings()
    logger.debug(
        f"Loaded authz settings: cache_ttl_seconds={settings.cache_ttl_seconds}, "
        f"review_namespace={settings.review_namespace!r}"
    )
    return settings
