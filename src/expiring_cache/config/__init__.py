"""Environment configuration."""

from .settings import Settings, configure_from_env, settings

__all__ = ["Settings", "configure_from_env", "settings"]
