from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Optional

from .civil import as_utc
from .config import TimeConfig, get_config

# Julian Date <-> datetime, anchored at J2000.0 (2000-01-01T12:00:00Z, JD 2451545.0).
# Both directions go through timedelta arithmetic, so round trips are exact
# to the microsecond resolution of datetime.

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
SECONDS_PER_DAY = 86400.0


def _unix_seconds(instant: datetime) -> float:
    return (as_utc(instant) - _UNIX_EPOCH).total_seconds()


def to_julian(instant: datetime, config: Optional[TimeConfig] = None) -> float:
    """datetime (naive = UTC) -> Julian Date."""
    cfg = config or get_config()
    dt_s = _unix_seconds(instant) - cfg.j2000_epoch_seconds
    return cfg.j2000_julian_date + dt_s / SECONDS_PER_DAY


def from_julian(jd: float, config: Optional[TimeConfig] = None) -> datetime:
    """Julian Date -> aware UTC datetime. Out-of-range dates raise OverflowError."""
    cfg = config or get_config()
    dt_s = (jd - cfg.j2000_julian_date) * SECONDS_PER_DAY
    return _UNIX_EPOCH + timedelta(seconds=cfg.j2000_epoch_seconds + dt_s)


def offset_by(instant: datetime, dt_s: float) -> datetime:
    """
    New datetime shifted by dt_s seconds (may be fractional or negative).
    Elapsed time, not wall-clock time: aware inputs are shifted in UTC and
    returned in their own zone; naive inputs stay naive.
    """
    if instant.tzinfo is None:
        return instant + timedelta(seconds=dt_s)
    return (as_utc(instant) + timedelta(seconds=dt_s)).astimezone(instant.tzinfo)
