"""Service configuration."""

from apierrors.config.settings import ServiceSettings

__all__ = ["ServiceSettings"]
