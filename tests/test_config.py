import math
from datetime import datetime, timezone

import pytest
import yaml

from timekit.config import (
    J2000_EPOCH_SECONDS,
    J2000_JULIAN_DATE,
    LogConfig,
    TimeConfig,
    get_config,
    set_config,
)
from timekit.civil import is_leap_year
from timekit.errors import ConfigError
from timekit.formatting import format_instant
from timekit.julian import to_julian
from timekit.sidereal import to_gmst


@pytest.fixture
def sample_config_file(tmp_path):
    data = {
        "timezone": "Australia/Sydney",
        "timezone_names": {
            "AEST": "Australian Eastern Standard Time",
            "AEDT": "Australian Eastern Daylight Time",
        },
        "leap_year_rule": "gregorian",
        "log": {"level": "DEBUG"},
    }
    config_file = tmp_path / "timekit.yml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_defaults():
    cfg = TimeConfig()
    assert cfg.j2000_epoch_seconds == J2000_EPOCH_SECONDS
    assert cfg.j2000_julian_date == J2000_JULIAN_DATE
    assert cfg.timezone is None
    assert cfg.timezone_names == {}
    assert cfg.leap_year_rule == "legacy"
    assert isinstance(cfg.log, LogConfig)


def test_load_yaml(sample_config_file):
    cfg = TimeConfig.load(str(sample_config_file))
    assert cfg.timezone == "Australia/Sydney"
    assert cfg.timezone_names["AEST"] == "Australian Eastern Standard Time"
    assert cfg.leap_year_rule == "gregorian"
    assert cfg.log.level == "DEBUG"


def test_load_from_env_path(sample_config_file, monkeypatch):
    monkeypatch.setenv("TIMEKIT_CONFIG", str(sample_config_file))
    assert TimeConfig.load().timezone == "Australia/Sydney"


def test_env_timezone_override(sample_config_file, monkeypatch):
    monkeypatch.setenv("TIMEKIT_TZ", "Europe/Rome")
    assert TimeConfig.load(str(sample_config_file)).timezone == "Europe/Rome"


def test_load_without_file_gives_defaults():
    assert TimeConfig.load() == TimeConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TimeConfig.load(str(tmp_path / "nope.yml"))


def test_invalid_leap_rule(tmp_path):
    bad = tmp_path / "bad.yml"
    bad.write_text("leap_year_rule: julian\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        TimeConfig.load(str(bad))


def test_non_mapping_yaml(tmp_path):
    bad = tmp_path / "list.yml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        TimeConfig.load(str(bad))


def test_get_and_set_config():
    cfg = TimeConfig(timezone="UTC")
    set_config(cfg)
    assert get_config() is cfg


def test_get_config_loads_once_after_reset():
    set_config(None)
    first = get_config()
    assert get_config() is first


def test_default_config_ignores_config_file_env(monkeypatch, tmp_path):
    monkeypatch.setenv("TIMEKIT_CONFIG", str(tmp_path / "nonexistent.yml"))
    set_config(None)
    assert get_config() == TimeConfig()


def test_default_config_reads_tz_env(monkeypatch):
    monkeypatch.setenv("TIMEKIT_TZ", "Asia/Kolkata")
    set_config(None)
    assert get_config().timezone == "Asia/Kolkata"


def test_core_operations_survive_bad_config_path(monkeypatch, tmp_path, utc):
    monkeypatch.setenv("TIMEKIT_CONFIG", str(tmp_path / "nonexistent.yml"))
    set_config(None)
    j2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert to_julian(j2000) == 2451545.0
    assert 0.0 <= to_gmst(j2000) < 2 * math.pi
    assert is_leap_year(j2000, utc) is True
    assert format_instant(j2000, "%Y-%m-%d", utc) == "2000-01-01"
