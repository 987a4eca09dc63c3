"""Configuration loading, schema, and defaults."""

from prpolicy.config.loader import ConfigError, load_config
from prpolicy.config.schema import LOG_LEVELS, OUTPUT_FORMATS, PrPolicyConfig

__all__ = [
    "ConfigError",
    "LOG_LEVELS",
    "OUTPUT_FORMATS",
    "PrPolicyConfig",
    "load_config",
]
