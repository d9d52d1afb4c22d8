import pytest
from pydantic import ValidationError

from roadmap.config import Settings


@pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), ("Info", "INFO"), ("WARNING", "WARNING")])
def test_log_level_is_upper_cased(raw, expected):
    assert Settings(LOG_LEVEL=raw).LOG_LEVEL == expected


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")
    assert Settings().LOG_LEVEL == "INFO"


def test_unknown_log_level_is_a_settings_error():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")
