"""Load and merge configuration from .prpolicy.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from prpolicy.config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    LoggingConfig,
    OutputConfig,
    PolicyConfig,
    PrPolicyConfig,
)

CONFIG_FILENAME = ".prpolicy.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: PrPolicyConfig) -> None:
    """Apply PRPOLICY_* environment variable overrides."""
    if val := os.environ.get("PRPOLICY_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("PRPOLICY_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.logging.level = val.upper()
    if val := os.environ.get("PRPOLICY_POLICY_PATH"):
        cfg.policy.path = val


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _validate(cfg: PrPolicyConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    level = str(cfg.logging.level).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {cfg.logging.level}")
    cfg.logging.level = level


def load_config(root: Path, config_override: Optional[str] = None) -> PrPolicyConfig:
    """Load, validate, and return a PrPolicyConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = PrPolicyConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = PrPolicyConfig(
            policy=_build_section(raw, PolicyConfig, "policy"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
