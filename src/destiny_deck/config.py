"""Configuration settings for the destiny deck engine."""

import os
import random
from typing import Optional


def _int_or_none(value: Optional[str]) -> Optional[int]:
    """Parse an optional integer environment value."""
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Base configuration class."""

    # Logging settings
    LOG_LEVEL = os.environ.get("DESTINY_DECK_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Shuffle settings
    SEED = _int_or_none(os.environ.get("DESTINY_DECK_SEED"))


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("DESTINY_DECK_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "DEBUG"
    SEED = 0


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.environ.get("DESTINY_DECK_LOG_LEVEL", "WARNING").upper()


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': Config,
}


def get_config(config_name: Optional[str] = None) -> type:
    """Get configuration class by name, falling back to DESTINY_DECK_ENV."""
    if config_name is None:
        config_name = os.environ.get('DESTINY_DECK_ENV', 'default')
    if config_name not in config:
        raise ValueError(f"Unknown configuration: {config_name}")
    return config[config_name]


_default_rng: Optional[random.Random] = None


def get_default_rng() -> random.Random:
    """Return the process-wide shuffle generator, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = random.Random(get_config().SEED)
    return _default_rng


def reset_default_rng(seed: Optional[int] = None) -> random.Random:
    """Replace the process-wide shuffle generator with a freshly seeded one."""
    global _default_rng
    _default_rng = random.Random(seed)
    return _default_rng
