import pytest

from clipstack.errors import InvalidConfiguration
from clipstack.main import load_settings, parse_args

pytestmark = pytest.mark.usefixtures("clean_env")


def test_defaults():
    settings = load_settings(parse_args([]))
    assert settings.max_entries == 50
    assert settings.poll_interval == 0.5
    assert settings.start_monitoring is True


def test_flags_override_env(monkeypatch):
    monkeypatch.setenv("CLIPSTACK_MAX_ENTRIES", "20")
    settings = load_settings(parse_args(["-m", "5", "-i", "1.5", "--paused", "-v"]))
    assert settings.max_entries == 5
    assert settings.poll_interval == 1.5
    assert settings.start_monitoring is False
    assert settings.log_level == "DEBUG"


def test_bad_flag_value():
    with pytest.raises(InvalidConfiguration):
        load_settings(parse_args(["--max-entries", "0"]))
