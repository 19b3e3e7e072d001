"""
Pydantic model for cache configuration coming from outside the process.
Why: validate the expiration period once, at the boundary.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .cache import ExpiringCache
from .errors import InvalidConfiguration


class CacheConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    expire_seconds: int = Field(default=60, ge=0, strict=True)

    def build_cache(self) -> ExpiringCache[Any]:
        return ExpiringCache(self.expire_seconds)


def load_config(raw: Mapping[str, Any]) -> CacheConfig:
    """Validate a raw mapping, reporting bad values as InvalidConfiguration."""
    try:
        return CacheConfig.model_validate(dict(raw))
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid cache configuration: {e}") from e
