import pytest
from pydantic import ValidationError

from flightradar.config import Settings


def test_defaults(monkeypatch):
    for name in ("AVIATIONSTACK_API_KEY", "AVIATIONSTACK_BASE_URL", "DISPLAY_TZ", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.AVIATIONSTACK_API_KEY is None
    assert s.AVIATIONSTACK_BASE_URL == "https://api.aviationstack.com/v1"
    assert s.DISPLAY_TZ == "UTC"
    assert s.LOG_LEVEL == "INFO"


def test_blank_api_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("AVIATIONSTACK_API_KEY", "   ")
    assert Settings(_env_file=None).AVIATIONSTACK_API_KEY is None


def test_unknown_display_zone_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DISPLAY_TZ="Mars/Olympus_Mons")


def test_log_level_is_normalised():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
