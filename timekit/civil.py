"""
Calendar primitives.

UTC fields come straight from the instant; "local" fields (leap year, day of
year, week of year) are taken in the zone given by `tz`, or the configured
zone, or the host zone, in that order.
"""

from __future__ import annotations
import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from dateutil import tz as dtz
from loguru import logger

from .config import get_config
from .errors import ConfigError
from .types import CivilComponents

_DAY = timedelta(days=1)


def as_utc(instant: datetime) -> datetime:
    """Aware UTC copy of `instant` (naive values are assumed UTC)."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def local_zone(tz: Optional[tzinfo] = None) -> tzinfo:
    if tz is not None:
        return tz
    name = get_config().timezone
    if not name:
        return dtz.tzlocal()
    zone = dtz.gettz(name)
    if zone is None:
        raise ConfigError(f"Unknown timezone: {name}")
    logger.debug(f"local zone resolved to {name}")
    return zone


def to_local(instant: datetime, tz: Optional[tzinfo] = None) -> datetime:
    return as_utc(instant).astimezone(local_zone(tz))


def ymd_hms(instant: datetime) -> CivilComponents:
    """Year, month, day, hour, minute and second in UTC."""
    u = as_utc(instant)
    return CivilComponents(u.year, u.month, u.day, u.hour, u.minute, u.second)


def is_leap_year(instant: datetime, tz: Optional[tzinfo] = None) -> bool:
    """
    Leap-year test on the local calendar year.

    The default "legacy" rule keeps century years divisible by 1000 (not 400)
    as leap years: 1900, 2100 and 2400 are not leap years; 2000 and 3000 are.
    Set leap_year_rule="gregorian" in the config for the standard rule.
    """
    y = to_local(instant, tz).year
    if get_config().leap_year_rule == "gregorian":
        return (y % 4 == 0) and ((y % 100 != 0) or (y % 400 == 0))
    return (y % 4 == 0) and ((y % 100 != 0) or (y % 1000 == 0))


def start_of_year(instant: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Local midnight of January 1 of the instant's local year."""
    local = to_local(instant, tz)
    return datetime(local.year, 1, 1, tzinfo=local.tzinfo)


def get_day_of_year(instant: datetime, tz: Optional[tzinfo] = None) -> float:
    """
    Days plus day fraction since the beginning of the local year.
    January 1 at midnight gives 1.0.
    """
    boy = start_of_year(instant, tz)
    # subtract in UTC: same-tzinfo subtraction ignores DST shifts
    return (as_utc(instant) - as_utc(boy) + _DAY) / _DAY


def get_week_of_year(instant: datetime, tz: Optional[tzinfo] = None) -> int:
    """
    Weeks (rounded up) since the first Sunday on or after January 1.
    Days before that Sunday belong to week 0.
    """
    local = to_local(instant, tz)
    jan1 = local.date().replace(month=1, day=1)
    # isoweekday: Monday=1 .. Sunday=7
    first_sunday_ord = jan1.toordinal() + (7 - jan1.isoweekday()) % 7
    days = local.date().toordinal() - first_sunday_ord
    if days < 0:
        return 0
    return math.ceil((days + 1) / 7)
