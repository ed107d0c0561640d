from __future__ import annotations
from datetime import datetime
from typing import NamedTuple

# An Instant is a plain datetime; naive values are read as UTC.
Instant = datetime

# Days, continuous, referenced to the Julian epoch.
JulianDate = float

# Radians in [0, 2pi).
SiderealAngle = float


class CivilComponents(NamedTuple):
    """
    UTC calendar fields of an instant.

    A NamedTuple rather than a slotted dataclass: callers unpack it positionally,
    e.g. `y, m, d, H, M, S = ymd_hms(dt)`, and gmst_deg_from_fields(*fields)
    takes it as-is.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
