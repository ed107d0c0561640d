from __future__ import annotations
import math
from datetime import datetime

from .civil import ymd_hms


def j0_from_calendar(y, m, d):
    """
    Julian Date at 0h UT of a calendar day (valid 1901-2099).
    Integer floor division, so it works on ints and numpy int arrays alike.
    """
    return 367 * y - (7 * (y + (m + 9) // 12)) // 4 + (275 * m) // 9 + d + 1721013.5


def wrap_degrees(angle):
    """Reduce an angle (scalar or array) to [0, 360)."""
    # floored modulo is non-negative even when GST0 < 0 (any date before late 1999),
    # but a tiny negative operand rounds up to exactly 360.0
    g = angle % 360.0
    return g - 360.0 * (g >= 360.0)


def gmst_deg_from_fields(y, m, d, H, M, S):
    """
    GMST in degrees [0, 360) from UTC calendar fields; scalars or numpy arrays.
    Low-precision polynomial model, good for years 1900-2100.
    """
    J0 = j0_from_calendar(y, m, d)
    UT = H + M / 60 + S / 3600
    T0 = (J0 - 2451545) / 36525
    GST0 = 100.4606184 + 36000.77004 * T0 + 0.000387933 * T0**2 - 2.583e-8 * T0**3
    return wrap_degrees(GST0 + 360.98564724 * UT / 24)


def to_gmst_degrees(instant: datetime) -> float:
    """Greenwich Mean Sidereal Time in degrees [0, 360)."""
    return float(gmst_deg_from_fields(*ymd_hms(instant)))


def to_gmst(instant: datetime) -> float:
    """GMST in radians [0, 2pi): angle of the prime meridian from the vernal equinox."""
    return to_gmst_degrees(instant) * math.pi / 180
