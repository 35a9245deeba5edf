"""
Configuration settings for utf8emit.
Environment variables (prefixed UTF8EMIT_) override defaults and YAML files.
"""
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from utf8emit.errors import ConfigError
from utf8emit.model import CellWidth, ErrorPolicy

ENV_PREFIX = "UTF8EMIT_"

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class Settings:
    """utf8emit configuration"""

    # Writer
    ERROR_POLICY: str = "abort"
    CELL_WIDTH: int = 32

    # CLI
    LOG_LEVEL: str = "WARNING"
    OUTPUT_FORMAT: str = "json"

    def __post_init__(self):
        """Load from environment variables"""
        for f in fields(self):
            env_value = os.getenv(ENV_PREFIX + f.name)
            if env_value is not None:
                if f.type in (int, "int"):
                    try:
                        setattr(self, f.name, int(env_value, 0))
                    except ValueError:
                        raise ConfigError(f"{ENV_PREFIX}{f.name} must be an integer, got {env_value!r}")
                else:
                    setattr(self, f.name, env_value)
        self.validate()

    def validate(self) -> None:
        for name in ("ERROR_POLICY", "LOG_LEVEL", "OUTPUT_FORMAT"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if isinstance(self.CELL_WIDTH, bool) or not isinstance(self.CELL_WIDTH, (int, str)):
            raise ConfigError(f"CELL_WIDTH must be an integer, got {self.CELL_WIDTH!r}")
        try:
            self.error_policy()
            self.cell_width()
        except ValueError as e:
            raise ConfigError(str(e))
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ConfigError(f"LOG_LEVEL must be a logging level name, got {self.LOG_LEVEL!r}")
        if self.OUTPUT_FORMAT.lower() not in OUTPUT_FORMATS:
            raise ConfigError(f"OUTPUT_FORMAT must be one of {OUTPUT_FORMATS}, got {self.OUTPUT_FORMAT!r}")

    def error_policy(self) -> ErrorPolicy:
        return ErrorPolicy(self.ERROR_POLICY.lower())

    def cell_width(self) -> CellWidth:
        return CellWidth.from_bits(self.CELL_WIDTH)


def settings_from_dict(d: Optional[Dict[str, Any]]) -> Settings:
    """Build Settings from a mapping of field names; env vars still win."""
    d = d or {}
    known = {f.name for f in fields(Settings)}
    unknown = [k for k in d if k.upper() not in known]
    if unknown:
        raise ConfigError(f"Unknown settings: {sorted(unknown)}")
    return Settings(**{k.upper(): v for k, v in d.items()})


def load_settings(path: str) -> Settings:
    """
    Load Settings from a YAML file.

    The file holds a mapping whose keys are Settings field names
    (case-insensitive), e.g.:

        error_policy: raise
        cell_width: 16

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the content is not a mapping or has bad values
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return settings_from_dict(data)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide Settings, built from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
