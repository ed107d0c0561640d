import os
import time

import pytest

from timekit.cli import main


def test_cli_reports_julian_date(capsys):
    code = main(["--jd", "2451545.0", "--tz", "UTC", "--format", "%Y-%m-%d %H:%M:%S"])
    out = capsys.readouterr().out
    assert code == 0
    assert "JD         : 2451545.000000" in out
    assert "Formatted  : 2000-01-01 12:00:00" in out
    assert "GMST       : 280.46" in out


def test_cli_parses_iso_instant(capsys):
    code = main(["--at", "2021-03-05T07:08:09Z", "--tz", "America/Los_Angeles", "--format", "%x %X %z"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Formatted  : 03/04/21 23:08:09 -0800" in out
    assert "Week       : 9" in out


def test_cli_unknown_timezone(capsys):
    code = main(["--tz", "Nowhere/Atlantis"])
    assert code == 2
    assert "Unknown timezone" in capsys.readouterr().err


def test_cli_bad_instant(capsys):
    code = main(["--at", "yesterday-ish", "--tz", "UTC"])
    assert code == 2
    assert "invalid --at" in capsys.readouterr().err


def test_cli_missing_config(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "missing.yml")])
    assert code == 2
    assert "Config file not found" in capsys.readouterr().err


@pytest.fixture
def kolkata_host():
    """Host zone set away from UTC for the duration of one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")
    old = os.environ.get("TZ")
    os.environ["TZ"] = "Asia/Kolkata"
    time.tzset()
    yield
    if old is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = old
    time.tzset()


def test_cli_naive_instant_is_utc(capsys, kolkata_host):
    code = main(["--at", "2000-01-01T12:00:00", "--tz", "UTC", "--format", "%H:%M"])
    out = capsys.readouterr().out
    assert code == 0
    assert "UTC        : 2000-01-01T12:00:00+00:00" in out
    assert "JD         : 2451545.000000" in out
    assert "Formatted  : 12:00" in out
