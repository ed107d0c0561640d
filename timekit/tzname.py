"""
Timezone names for the local zone.

The name comes from a LocaleTimeZoneProvider. The default HostTimeZoneProvider
asks the zone for its tzname at the instant (so DST is accounted for) and
expands it through the configured `timezone_names` table, e.g.
    {"AEST": "Australian Eastern Standard Time"}
Tests use FixedTimeZoneProvider for deterministic names.
"""

from __future__ import annotations
from datetime import datetime, tzinfo
from typing import Mapping, Optional, Protocol

from .civil import to_local
from .config import get_config


class LocaleTimeZoneProvider(Protocol):
    def name(self, instant: datetime) -> str:
        ...


class HostTimeZoneProvider:
    def __init__(self,
                 tz: Optional[tzinfo] = None,
                 names: Optional[Mapping[str, str]] = None):
        self.tz = tz
        self.names = names

    def name(self, instant: datetime) -> str:
        raw = to_local(instant, self.tz).tzname() or ""
        names = self.names if self.names is not None else get_config().timezone_names
        return names.get(raw, raw)


class FixedTimeZoneProvider:
    """Always answers the same name."""

    def __init__(self, name: str):
        self._name = name

    def name(self, instant: datetime) -> str:
        return self._name


def get_timezone_name(instant: datetime,
                      provider: Optional[LocaleTimeZoneProvider] = None) -> str:
    provider = provider or HostTimeZoneProvider()
    return provider.name(instant)


def get_timezone_abbr(instant: datetime,
                      provider: Optional[LocaleTimeZoneProvider] = None) -> str:
    """
    Best-guess abbreviation: first letter of each word of the name.
    "Pacific Daylight Time" -> "PDT". Single-word names collapse to one letter.
    """
    tzn = get_timezone_name(instant, provider)
    return "".join(part[0] for part in tzn.split(" ") if part)
