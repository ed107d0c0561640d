"""
Batch forms of the Julian and GMST conversions, for numpy arrays of instants.

Inputs are anything numpy can turn into datetime64 (arrays, lists of naive UTC
datetimes or ISO strings); aware datetimes are converted to UTC first.
Results are flat 1-D arrays in input order.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

import numpy as np

from .civil import as_utc
from .config import TimeConfig, get_config
from .julian import SECONDS_PER_DAY
from .sidereal import gmst_deg_from_fields


def as_datetime64(times: Any) -> np.ndarray:
    """Flat datetime64[us] array of UTC instants."""
    if isinstance(times, np.ndarray) and np.issubdtype(times.dtype, np.datetime64):
        return times.ravel().astype("datetime64[us]")
    items = [as_utc(t).replace(tzinfo=None) if isinstance(t, datetime) else t
             for t in np.ravel(np.asarray(times, dtype=object))]
    return np.array(items, dtype="datetime64[us]")


def to_julian_many(times: Any, config: Optional[TimeConfig] = None) -> np.ndarray:
    cfg = config or get_config()
    unix_s = as_datetime64(times).astype(np.int64) / 1e6
    return cfg.j2000_julian_date + (unix_s - cfg.j2000_epoch_seconds) / SECONDS_PER_DAY


def from_julian_many(jd: Any, config: Optional[TimeConfig] = None) -> np.ndarray:
    cfg = config or get_config()
    jd = np.ravel(np.asarray(jd, dtype=float))
    unix_s = cfg.j2000_epoch_seconds + (jd - cfg.j2000_julian_date) * SECONDS_PER_DAY
    return np.round(unix_s * 1e6).astype(np.int64).astype("datetime64[us]")


def to_gmst_many(times: Any) -> np.ndarray:
    """GMST in radians, element-wise; shares sidereal.gmst_deg_from_fields with to_gmst."""
    t = as_datetime64(times)
    days = t.astype("datetime64[D]")
    months = t.astype("datetime64[M]")

    y = t.astype("datetime64[Y]").astype(np.int64) + 1970
    m = months.astype(np.int64) % 12 + 1
    d = (days - months.astype("datetime64[D]")).astype(np.int64) + 1
    sod = (t - days).astype("timedelta64[s]").astype(np.int64)
    H, M, S = sod // 3600, (sod % 3600) // 60, sod % 60

    return np.radians(gmst_deg_from_fields(y, m, d, H, M, S))
