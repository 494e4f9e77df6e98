"""Nested pydantic-settings configuration for the binding helpers.

Each sub-config reads its own ``BINDINGX_<GROUP>_*`` env vars::

    export BINDINGX_KEYS_RUNTIME_PROPS=props
    export BINDINGX_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class ParamKeysConfig(BaseSettings):
    """Well-known parameter key names.

    Env vars use ``BINDINGX_KEYS_`` prefix.
    """

    model_config = {"env_prefix": "BINDINGX_KEYS_"}

    runtime_props: str = Field(default="props", min_length=1)
    origin: str = Field(default="origin", min_length=1)
    transformed: str = Field(default="transformed", min_length=1)


class TransformConfig(BaseSettings):
    """Transform normalization constants.

    Env vars use ``BINDINGX_TRANSFORM_`` prefix.
    """

    model_config = {"env_prefix": "BINDINGX_TRANSFORM_"}

    camera_distance_multiplier: float = Field(default=5.0, gt=0.0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``BINDINGX_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "BINDINGX_OBSERVABILITY_"}

    log_level: str = "INFO"


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    keys: ParamKeysConfig = Field(default_factory=ParamKeysConfig)
    transform: TransformConfig = Field(default_factory=TransformConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide settings, read from the environment once."""
    return AppSettings()
