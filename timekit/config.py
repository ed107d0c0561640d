"""
TimeConfig — configurazione condivisa del pacchetto.

Fields:
    j2000_epoch_seconds  Unix seconds of 2000-01-01T12:00:00Z
    j2000_julian_date    JD of the same instant
    timezone             IANA name of the "local" zone (None = host zone)
    timezone_names       raw tzname -> long name, e.g. {"PDT": "Pacific Daylight Time"}
    leap_year_rule       "legacy" (div. by 4, not 100 unless 1000) | "gregorian"
    log                  LogConfig

Usage:
    cfg = TimeConfig.load("timekit.yml")
    set_config(cfg)
"""

from __future__ import annotations
import os
from typing import Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ValidationError

from .errors import ConfigError


J2000_EPOCH_SECONDS = 946728000.0
J2000_JULIAN_DATE = 2451545.0

CONFIG_ENV = "TIMEKIT_CONFIG"
TZ_ENV = "TIMEKIT_TZ"


class LogConfig(BaseModel):
    level: str = "WARNING"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class TimeConfig(BaseModel):
    j2000_epoch_seconds: float = J2000_EPOCH_SECONDS
    j2000_julian_date: float = J2000_JULIAN_DATE
    timezone: Optional[str] = None
    timezone_names: Dict[str, str] = {}
    leap_year_rule: Literal["legacy", "gregorian"] = "legacy"
    log: LogConfig = LogConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "TimeConfig":
        """
        Load YAML config + .env.
        - path defaults to $TIMEKIT_CONFIG; with neither, defaults are used
        - $TIMEKIT_TZ overrides `timezone`
        """
        load_dotenv()

        if path is None:
            path = os.getenv(CONFIG_ENV)

        raw: dict = {}
        if path:
            if not os.path.exists(path):
                raise FileNotFoundError(f"Config file not found: {path}")
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise ConfigError(f"Config file must contain a mapping: {path}")

        tz_override = os.getenv(TZ_ENV)
        if tz_override:
            raw["timezone"] = tz_override

        try:
            cfg = cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path or 'environment'}: {e}") from e

        logger.debug(f"config loaded from {path or 'defaults'} (timezone={cfg.timezone})")
        return cfg


_config: Optional[TimeConfig] = None


def get_config() -> TimeConfig:
    """
    Process-wide configuration. Until set_config() installs one, this is the
    built-in defaults plus $TIMEKIT_TZ; no file or .env is read here, that is
    the job of TimeConfig.load() (called by the CLI).
    """
    global _config
    if _config is None:
        tz_override = os.getenv(TZ_ENV)
        _config = TimeConfig(timezone=tz_override or None)
    return _config


def set_config(cfg: Optional[TimeConfig]) -> None:
    """Replace the process-wide configuration (None = back to defaults on next use)."""
    global _config
    _config = cfg
