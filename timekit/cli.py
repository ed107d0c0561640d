"""
timekit — print calendar / sidereal facts about an instant.

Usage:
    timekit                                   # now
    timekit --at 2021-03-05T07:08:09Z --format "%Y-%m-%d %H:%M:%S"
    timekit --jd 2451545.0 --tz Australia/Sydney
"""

from __future__ import annotations
import argparse
import math
import sys
from datetime import datetime, timezone
from typing import List, Optional

from dateutil import parser as dtparser
from loguru import logger

from .civil import as_utc, get_day_of_year, get_week_of_year, is_leap_year, local_zone
from .config import TimeConfig, set_config
from .errors import ConfigError
from .formatting import format_instant
from .julian import from_julian, to_julian
from .log import setup_logging
from .sidereal import to_gmst
from .tzname import HostTimeZoneProvider, get_timezone_abbr, get_timezone_name


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="timekit", description="Julian date, GMST and calendar fields of an instant.")
    when = ap.add_mutually_exclusive_group()
    when.add_argument("--at", default=None, help="ISO 8601 instant (naive = UTC). Default: now")
    when.add_argument("--jd", type=float, default=None, help="Julian Date")
    ap.add_argument("--tz", default=None, help="IANA zone used as 'local' (default: config / host)")
    ap.add_argument("--format", default="%c %Z", help="Format template")
    ap.add_argument("--config", default=None, help="YAML config file")
    ap.add_argument("--log-level", default=None, help="Override configured log level")
    return ap


def resolve_instant(args: argparse.Namespace) -> datetime:
    if args.jd is not None:
        return from_julian(args.jd)
    if args.at is not None:
        return dtparser.isoparse(args.at)
    return datetime.now(timezone.utc)


def report(instant: datetime) -> List[str]:
    zone = local_zone()
    provider = HostTimeZoneProvider(zone)
    gmst = to_gmst(instant)
    return [
        f"UTC        : {as_utc(instant).isoformat()}",
        f"JD         : {to_julian(instant):.6f}",
        f"GMST       : {math.degrees(gmst):.6f} deg ({gmst:.9f} rad)",
        f"Day of year: {get_day_of_year(instant, zone):.6f}",
        f"Week       : {get_week_of_year(instant, zone)}",
        f"Leap year  : {is_leap_year(instant, zone)}",
        f"Timezone   : {get_timezone_name(instant, provider)} ({get_timezone_abbr(instant, provider)})",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = TimeConfig.load(args.config)
        if args.tz:
            cfg = cfg.model_copy(update={"timezone": args.tz})
        if args.log_level:
            cfg = cfg.model_copy(update={"log": cfg.log.model_copy(update={"level": args.log_level})})
        set_config(cfg)
        setup_logging(cfg.log)
        local_zone()
    except (ConfigError, FileNotFoundError) as e:
        print(f"timekit: {e}", file=sys.stderr)
        return 2

    try:
        instant = resolve_instant(args)
    except ValueError as e:
        print(f"timekit: invalid --at value: {e}", file=sys.stderr)
        return 2

    logger.info(f"reporting for {instant.isoformat()}")
    lines = report(instant)
    lines.append(f"Formatted  : {format_instant(instant, args.format)}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
