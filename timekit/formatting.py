"""
Format engine — percent-directive templates, strftime style.

Directives:
    %a %A  weekday short / full          %w  weekday number (Sunday=0)
    %d     day of month (2)              %b %B  month short / full
    %m     month (2)                     %y %Y  year 2-digit / full
    %H     hour 24h (2)                  %I  hour 12h (2)     %p  AM/PM
    %M %S  minute, second (2)            %f  microseconds (6)
    %z     UTC offset +HHMM              %Z  timezone abbreviation
    %j     day of year (3)               %U  week of year, Sunday first (2)
    %W     week of the following day     %X  %H:%M:%S
    %c     %a %b %d %X %Y                %x  %m/%d/%y
    %%     literal %

The template is scanned once, left to right; each "%<char>" token is looked up
in a table built for the call. Unknown directives are copied verbatim and
expanded text is never scanned again, so "%%Y" renders "%Y".
"""

from __future__ import annotations
import re
from datetime import datetime, tzinfo
from typing import Dict, Optional

from loguru import logger

from .civil import get_day_of_year, get_week_of_year, local_zone, to_local
from .julian import offset_by
from .padding import zero_pad
from .tzname import HostTimeZoneProvider, LocaleTimeZoneProvider, get_timezone_abbr

DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
MONTHS = ["January", "February", "March", "April", "May", "June", "July",
          "August", "September", "October", "November", "December"]

_TOKEN = re.compile(r"%(.)", re.DOTALL)


def utc_offset_string(local: datetime) -> str:
    offset = local.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if minutes < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return sign + zero_pad(hh, 2) + zero_pad(mm, 2)


def build_table(instant: datetime,
                tz: Optional[tzinfo] = None,
                provider: Optional[LocaleTimeZoneProvider] = None) -> Dict[str, str]:
    """Substitution table for one formatting call, keyed by directive char."""
    zone = local_zone(tz)
    provider = provider or HostTimeZoneProvider(zone)
    local = to_local(instant, zone)
    dow = local.isoweekday() % 7

    table = {
        "a": DAYS[dow][:3],
        "A": DAYS[dow],
        "w": str(dow),
        "d": zero_pad(local.day, 2),
        "b": MONTHS[local.month - 1][:3],
        "B": MONTHS[local.month - 1],
        "m": zero_pad(local.month, 2),
        "y": zero_pad(local.year % 100, 2),
        "Y": str(local.year),
        "H": zero_pad(local.hour, 2),
        "I": zero_pad(local.hour % 12 or 12, 2),
        "p": "PM" if local.hour >= 12 else "AM",
        "M": zero_pad(local.minute, 2),
        "S": zero_pad(local.second, 2),
        "f": zero_pad(local.microsecond, 6),
        "z": utc_offset_string(local),
        "Z": get_timezone_abbr(instant, provider),
        "j": zero_pad(int(get_day_of_year(instant, zone)), 3),
        "U": zero_pad(get_week_of_year(instant, zone), 2),
        "W": str(get_week_of_year(offset_by(instant, 86400), zone)),
        "%": "%",
    }
    # composites last, from the values above
    table["X"] = f"{table['H']}:{table['M']}:{table['S']}"
    table["c"] = f"{table['a']} {table['b']} {table['d']} {table['X']} {table['Y']}"
    table["x"] = f"{table['m']}/{table['d']}/{table['y']}"
    return table


def format(instant: datetime,
           template: str,
           tz: Optional[tzinfo] = None,
           provider: Optional[LocaleTimeZoneProvider] = None) -> str:
    table = build_table(instant, tz, provider)
    logger.debug(f"format {template!r}: {len(table)} directives resolved")
    return _TOKEN.sub(lambda m: table.get(m.group(1), m.group(0)), template)


format_instant = format
