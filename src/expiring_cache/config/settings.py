"""Environment-driven settings for the cache."""
import os
from typing import Any, Dict

from dotenv import load_dotenv

from expiring_cache.core.cache import ExpiringCache
from expiring_cache.core.errors import InvalidConfiguration
from expiring_cache.core.logging import is_level_name, setup_logging
from expiring_cache.core.schemas import CacheConfig, load_config

load_dotenv()


class Settings:
    """Reads the environment at call time so tests can patch it."""

    @property
    def cache_expire_seconds(self) -> str:
        return os.getenv("CACHE_EXPIRE_SECONDS", "60")

    @property
    def log_level(self) -> str:
        value = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if not is_level_name(value):
            raise InvalidConfiguration(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return value

    def cache_config(self) -> CacheConfig:
        raw: Dict[str, Any] = {}
        value = self.cache_expire_seconds.strip()
        try:
            raw["expire_seconds"] = int(value)
        except ValueError as e:
            raise InvalidConfiguration(
                f"CACHE_EXPIRE_SECONDS must be an integer, got {value!r}"
            ) from e
        return load_config(raw)


settings = Settings()


def configure_from_env() -> ExpiringCache[Any]:
    """Set up logging and build the process-wide cache from the environment."""
    setup_logging(settings.log_level)
    return settings.cache_config().build_cache()
