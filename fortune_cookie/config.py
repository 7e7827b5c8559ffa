"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_random_seed() -> int | None:
    """Resolve an optional seed for the fortune random source.

    Unset (the default) means system entropy.
    """

    raw = (os.getenv("RANDOM_SEED") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Cosmetic delay between a trigger and the fortune appearing.
    REVEAL_DELAY_MS: int = _int_env("REVEAL_DELAY_MS", 200)

    # Upper bound on live reveal sessions kept in memory.
    MAX_SURFACES: int = _int_env("MAX_SURFACES", 1000)

    RANDOM_SEED: int | None = resolve_random_seed()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
