"""
timekit — calendar and time conversions.

Usage:
    from timekit import to_julian, to_gmst, format_instant
    jd = to_julian(datetime(2000, 1, 1, 12, tzinfo=timezone.utc))   # 2451545.0
    theta = to_gmst(dt)                                               # radians
    text = format_instant(dt, "%Y-%m-%d %H:%M:%S %Z")
"""

from loguru import logger

from .types import CivilComponents, Instant, JulianDate, SiderealAngle
from .padding import ordinal_suffix, zero_pad
from .config import (
    J2000_EPOCH_SECONDS,
    J2000_JULIAN_DATE,
    LogConfig,
    TimeConfig,
    get_config,
    set_config,
)
from .errors import ConfigError
from .civil import (
    get_day_of_year,
    get_week_of_year,
    is_leap_year,
    local_zone,
    to_local,
    ymd_hms,
)
from .julian import from_julian, offset_by, to_julian
from .sidereal import to_gmst, to_gmst_degrees
from .tzname import (
    FixedTimeZoneProvider,
    HostTimeZoneProvider,
    LocaleTimeZoneProvider,
    get_timezone_abbr,
    get_timezone_name,
)
from .formatting import format_instant
from .vectorized import from_julian_many, to_gmst_many, to_julian_many
from .log import setup_logging

# silent until setup_logging() is called
logger.disable("timekit")

__all__ = [
    "CivilComponents",
    "Instant",
    "JulianDate",
    "SiderealAngle",
    "ordinal_suffix",
    "zero_pad",
    "J2000_EPOCH_SECONDS",
    "J2000_JULIAN_DATE",
    "LogConfig",
    "TimeConfig",
    "get_config",
    "set_config",
    "ConfigError",
    "get_day_of_year",
    "get_week_of_year",
    "is_leap_year",
    "local_zone",
    "to_local",
    "ymd_hms",
    "from_julian",
    "offset_by",
    "to_julian",
    "to_gmst",
    "to_gmst_degrees",
    "FixedTimeZoneProvider",
    "HostTimeZoneProvider",
    "LocaleTimeZoneProvider",
    "get_timezone_abbr",
    "get_timezone_name",
    "format_instant",
    "from_julian_many",
    "to_gmst_many",
    "to_julian_many",
    "setup_logging",
]

__version__ = '0.1.0'
